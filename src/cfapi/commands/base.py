# -*- coding: utf-8 -*-
"""命令基类

每个远程方法对应一个命令类。派发器与解码器只依赖这里的接口，
新增方法只需继承 CFCommand，不需要修改其他模块。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from ..auth.params import ParamValue
from ..exceptions import InvalidParameterError
from ..responses.result import ResultTag

Params = Dict[str, Optional[ParamValue]]


class CFCommand(ABC):
    """Codeforces API 命令基类

    子类一般是 frozen dataclass，构造后不可修改。
    """

    @property
    @abstractmethod
    def method_name(self) -> str:
        """远程方法名，如 'blogEntry.view'"""
        pass

    @property
    @abstractmethod
    def result_tag(self) -> ResultTag:
        """期望的结果标签"""
        pass

    @abstractmethod
    def parameters(self) -> Params:
        """命令自身的参数（线上参数名 -> 值）

        未设置的可选参数以 None 表示，编码时整体省略。
        """
        pass

    def __str__(self) -> str:
        return self.method_name


def require_text(name: str, value: str) -> None:
    """必填字符串参数不能为空"""
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameterError(name, f"参数 {name} 不能为空")


def require_items(name: str, value: Optional[Sequence[str]], optional: bool = False) -> None:
    """列表参数：非空，且每一项都是非空字符串"""
    if value is None and optional:
        return
    if isinstance(value, str) or not value:
        raise InvalidParameterError(name, f"参数 {name} 必须是非空列表")
    for item in value:
        require_text(name, item)


def require_int(name: str, value: Optional[int], optional: bool = False) -> None:
    """整数参数：必须是 int（bool 不算）；optional 时允许 None"""
    if value is None and optional:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, f"参数 {name} 必须是整数")


def require_flag(name: str, value: Optional[bool]) -> None:
    """可选布尔参数：只能是 True、False 或 None"""
    if value is not None and not isinstance(value, bool):
        raise InvalidParameterError(name, f"参数 {name} 必须是布尔值")
