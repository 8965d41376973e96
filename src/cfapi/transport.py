# -*- coding: utf-8 -*-
"""HTTP 传输

核心逻辑只依赖 Transport 接口；默认实现基于 requests。
"""

from __future__ import annotations

import re
from typing import Protocol

import requests
from loguru import logger

from .exceptions import TransportError

USER_AGENT = "Mozilla/5.0 (compatible; cfapi/1.0)"

_QUERY_RE = re.compile(r"\?[^\s'\")]+")


class Transport(Protocol):
    """传输接口：GET 一个完整的 URL，返回原始响应体"""

    def get(self, url: str) -> bytes:
        """发送请求

        Raises:
            TransportError: 网络不可达、超时或服务端5xx
        """
        ...


class RequestsTransport:
    """基于 requests.Session 的传输实现"""

    def __init__(self, timeout: int = 30, proxies: dict | None = None, verify_ssl: bool = True,
                 session: requests.Session | None = None):
        self.timeout = timeout
        self.proxies = proxies or None
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json, text/plain, */*",
            "User-Agent": USER_AGENT,
        })

    def get(self, url: str) -> bytes:
        # 查询串已编码且已签名，直接作为URL发送，不再交给 requests 拼接参数
        try:
            r = self.session.get(url, timeout=self.timeout, proxies=self.proxies, verify=self.verify_ssl)
        except requests.RequestException as e:
            raise TransportError(describe_failure(e), url=strip_query(url)) from e

        logger.debug(f"CFApi: HTTP {r.status_code}, {len(r.content)} bytes")
        if r.status_code >= 500:
            raise TransportError(f"服务端错误: HTTP {r.status_code}", url=strip_query(url))
        if r.status_code != 200:
            # 请求被拒绝时服务端仍返回 FAILED 信封，交给解码器处理
            logger.warning(f"CFApi: HTTP {r.status_code} – {r.text[:200]}")
        return r.content

    def close(self) -> None:
        self.session.close()


def strip_query(url: str) -> str:
    """去掉查询串（其中含 apiKey/apiSig，不写入异常与日志）"""
    return url.split("?", 1)[0]


def redact_query(text: str) -> str:
    """把文本中出现的查询串替换为 ?<redacted>"""
    return _QUERY_RE.sub("?<redacted>", text)


def describe_failure(e: BaseException) -> str:
    """异常描述：requests 的异常文本会带上完整URL，查询串需先抹掉"""
    return f"请求失败: {type(e).__name__}: {redact_query(str(e))}"
