# -*- coding: utf-8 -*-
"""命令派发

Built -> Encoded -> Signed -> Sent -> {Decoded | TransportError | ApiError | DecodeError}

每次调用相互独立，不保留任何状态；不做重试，重试策略由调用方决定。
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .auth.credentials import Credentials
from .auth.signer import Clock, NonceSource, SignedRequest, Signer
from .commands.base import CFCommand
from .exceptions import DecodeError, TransportError
from .responses.decoder import BODY_PATH, decode_response
from .responses.result import CFResult
from .transport import Transport, describe_failure, strip_query

API_BASE_URL = "https://codeforces.com/api/"


class Dispatcher:
    """组装签名请求、调用注入的传输、解码响应"""

    def __init__(self, base_url: str = API_BASE_URL, clock: Optional[Clock] = None,
                 nonce_source: Optional[NonceSource] = None):
        self.base_url = base_url
        self.signer = Signer(clock=clock, nonce_source=nonce_source)

    def sign(self, command: CFCommand, credentials: Credentials) -> SignedRequest:
        return self.signer.sign(command.method_name, command.parameters(), credentials)

    def build_url(self, command: CFCommand, credentials: Credentials) -> str:
        """生成完整的签名URL（不发送）"""
        return self.sign(command, credentials).url(self.base_url)

    def _send(self, command: CFCommand, credentials: Credentials, transport: Transport) -> bytes:
        url = self.build_url(command, credentials)
        logger.debug(f"CFApi: 请求 {command.method_name}")
        try:
            return transport.get(url)
        except TransportError:
            raise
        except OSError as e:
            # requests.RequestException 也是 OSError 的子类
            raise TransportError(describe_failure(e), url=strip_query(url)) from e

    def execute_raw(self, command: CFCommand, credentials: Credentials, transport: Transport) -> str:
        """签名并发送，返回未解码的响应文本"""
        raw = self._send(command, credentials, transport)
        if not isinstance(raw, bytes):
            return raw
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(BODY_PATH, "响应不是合法的 UTF-8") from e

    def execute(self, command: CFCommand, credentials: Credentials, transport: Transport) -> CFResult:
        """执行命令并返回与命令声明一致的结果

        Raises:
            InvalidParameterError: 命令参数不合法
            TransportError: 网络失败
            ApiError: 服务端返回 FAILED
            DecodeError: 响应结构不符
        """
        raw = self._send(command, credentials, transport)
        return decode_response(raw, command.result_tag)


_default_dispatcher = Dispatcher()


def execute(command: CFCommand, credentials: Credentials, transport: Transport) -> CFResult:
    """使用默认派发器执行命令"""
    return _default_dispatcher.execute(command, credentials, transport)


def execute_raw(command: CFCommand, credentials: Credentials, transport: Transport) -> str:
    return _default_dispatcher.execute_raw(command, credentials, transport)
