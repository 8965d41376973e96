# -*- coding: utf-8 -*-
"""cfapi - Codeforces API 客户端

每个请求都用 apiKey/apiSecret 签名；每个命令声明自己期望的结果类型，
响应被解码为对应的结果类。

    from cfapi import CodeforcesClient, Credentials
    from cfapi.commands import BlogEntryView
    from cfapi.responses import ResultTag

    client = CodeforcesClient(Credentials("<api_key>", "<api_secret>"))
    entry = client.execute(BlogEntryView(blog_entry_id=82347)).expect(ResultTag.BLOG_ENTRY).value

库内日志默认关闭，需要时调用 cfapi.logger.configure_logger()（级别取自 CF_LOG_LEVEL）。
"""

from loguru import logger

from .auth import Credentials, Signer, SignedRequest
from .client import CodeforcesClient
from .dispatcher import API_BASE_URL, Dispatcher, execute, execute_raw
from .exceptions import (
    ApiError,
    CFAPIException,
    DecodeError,
    InvalidParameterError,
    ResultMismatchError,
    TransportError,
)
from .responses import CFResult, ResultTag
from .transport import RequestsTransport, Transport

__version__ = "1.0.0"

logger.disable("cfapi")

__all__ = [
    "Credentials",
    "Signer",
    "SignedRequest",
    "CodeforcesClient",
    "API_BASE_URL",
    "Dispatcher",
    "execute",
    "execute_raw",
    "ApiError",
    "CFAPIException",
    "DecodeError",
    "InvalidParameterError",
    "ResultMismatchError",
    "TransportError",
    "CFResult",
    "ResultTag",
    "RequestsTransport",
    "Transport",
]
