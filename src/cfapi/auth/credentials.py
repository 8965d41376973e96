# -*- coding: utf-8 -*-
"""API 凭据"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import InvalidParameterError


@dataclass(frozen=True)
class Credentials:
    """apiKey 随请求发送；api_secret 只参与哈希，不会出现在请求或日志中"""
    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self):
        if not self.api_key:
            raise InvalidParameterError("apiKey", "API key 不能为空")
        if not self.api_secret:
            raise InvalidParameterError("apiSecret", "API secret 不能为空")
