# -*- coding: utf-8 -*-
"""规范化参数编码

签名与实际发送的查询串都来自同一份编码结果：
按参数名、再按参数值做字典序排序，值做百分号编码。
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote

from ..exceptions import InvalidParameterError

# 服务端对列表参数（handles、tags）使用分号分隔
LIST_SEPARATOR = ";"

# 由签名流程追加的参数名，命令自身不得使用
RESERVED_PARAMS = ("apiKey", "time", "apiSig")

ParamValue = Union[str, int, bool, Sequence[str]]
EncodedPairs = List[Tuple[str, str]]


def serialize_value(name: str, value: ParamValue) -> str:
    """把单个参数值转为未编码的字符串"""
    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
        if not items:
            raise InvalidParameterError(name, f"列表参数 {name} 不能为空")
        return LIST_SEPARATOR.join(items)
    raise InvalidParameterError(name, f"不支持的参数类型: {type(value).__name__}")


def encode_value(raw: str) -> str:
    """百分号编码（列表分隔符保持原样）"""
    return quote(raw, safe=LIST_SEPARATOR)


def validate_param_name(name: str, allow_reserved: bool = False) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidParameterError(str(name), "参数名不能为空")
    if not allow_reserved and name in RESERVED_PARAMS:
        raise InvalidParameterError(name, f"参数名 {name} 由签名流程保留")


def canonicalize(params: Mapping[str, Optional[ParamValue]], allow_reserved: bool = False) -> EncodedPairs:
    """生成规范化的 (name, value) 序列

    Args:
        params: 参数映射，值为 None 的可选参数直接省略
        allow_reserved: 是否允许 apiKey/time 等保留名（签名流程内部使用）

    Returns:
        按 (name, encoded_value) 排序的列表
    """
    pairs: EncodedPairs = []
    for name, value in params.items():
        validate_param_name(name, allow_reserved=allow_reserved)
        if value is None:
            continue
        pairs.append((name, encode_value(serialize_value(name, value))))
    pairs.sort()
    return pairs


def to_query_string(pairs: EncodedPairs) -> str:
    """拼接为 k1=v1&k2=v2 形式（不再二次编码）"""
    return "&".join(f"{name}={value}" for name, value in pairs)


def merge_params(*mappings: Mapping[str, Optional[ParamValue]]) -> Dict[str, Optional[ParamValue]]:
    """合并多个参数映射，重复的参数名视为调用方错误"""
    merged: Dict[str, Optional[ParamValue]] = {}
    for mapping in mappings:
        for name, value in mapping.items():
            if name in merged:
                raise InvalidParameterError(name, f"参数名重复: {name}")
            merged[name] = value
    return merged
