# -*- coding: utf-8 -*-
"""响应解码

{status: "OK"|"FAILED", result?: ..., comment?: "..."}
先解析外层信封，再把 result 按命令声明的结果标签解码。
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable, Optional, Union

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import ApiError, DecodeError, ResultMismatchError
from .result import CFResult, ResultTag, result_class_for

# 信封不是合法 JSON 对象时使用的字段路径
BODY_PATH = "<body>"


class ResponseStatus(str, Enum):
    OK = "OK"
    FAILED = "FAILED"


class Envelope(BaseModel):
    status: ResponseStatus
    result: Any = None
    comment: Optional[str] = None


def format_field_path(loc: Iterable[Union[str, int]], root: str = "result") -> str:
    """把 pydantic 的 loc 元组转为 result[0].problem.name 形式"""
    path = root
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def parse_envelope(raw: Union[bytes, str]) -> Envelope:
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(BODY_PATH, f"响应不是合法的JSON ({e})") from e
    if not isinstance(data, dict):
        raise DecodeError(BODY_PATH, "响应不是JSON对象")
    try:
        return Envelope.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise DecodeError(format_field_path(first["loc"], root="").lstrip(".") or BODY_PATH,
                          f"响应信封格式错误: {first['msg']}") from e


def decode_payload(payload: Any, tag: ResultTag) -> CFResult:
    """把 result 载荷解码为指定标签的结果

    载荷按 JSON 严格模式校验：字符串 "82347" 不会被当作整数，
    "yes"/"1" 也不会被当作布尔值。
    """
    result_cls = result_class_for(tag)
    try:
        value = TypeAdapter(result_cls.payload_type).validate_json(json.dumps(payload), strict=True)
    except ValidationError as e:
        first = e.errors()[0]
        field_path = format_field_path(first["loc"])
        logger.debug(f"CFApi: 解码 {tag.value} 失败 {field_path}: {first['msg']}")
        raise DecodeError(field_path, first["msg"]) from e
    result = result_cls(value=value)
    if result.tag is not tag:
        raise ResultMismatchError(tag.value, result.tag.value)
    return result


def decode_response(raw: Union[bytes, str], tag: ResultTag) -> CFResult:
    """解码完整响应

    Raises:
        ApiError: status 为 FAILED（无论是否带 result）
        DecodeError: 信封或载荷结构不符
    """
    envelope = parse_envelope(raw)
    if envelope.status is ResponseStatus.FAILED:
        raise ApiError(envelope.comment or "")
    if envelope.result is None:
        raise DecodeError("result", "响应缺少 result 字段")
    return decode_payload(envelope.result, tag)
