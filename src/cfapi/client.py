# -*- coding: utf-8 -*-
"""便捷客户端：把配置、凭据与默认传输组合在一起"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .auth.credentials import Credentials
from .commands.base import CFCommand
from .config import ClientConfig, get_config
from .dispatcher import Dispatcher
from .responses.result import CFResult
from .transport import RequestsTransport, Transport


class CodeforcesClient:
    """Codeforces API 客户端

    Example:
        client = CodeforcesClient()
        entry = client.execute(BlogEntryView(blog_entry_id=82347)).value
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.config = config or get_config()
        self.credentials = credentials or self.config.credentials()
        self.transport = transport or RequestsTransport(
            timeout=self.config.timeout,
            proxies=self.config.proxies,
            verify_ssl=self.config.verify_ssl,
        )
        self.dispatcher = dispatcher or Dispatcher(base_url=self.config.api_base_url)
        logger.debug(f"CodeforcesClient: apiKey={self.credentials.api_key[:6]}..., base={self.dispatcher.base_url}")

    def execute(self, command: CFCommand) -> CFResult:
        return self.dispatcher.execute(command, self.credentials, self.transport)

    def execute_raw(self, command: CFCommand) -> str:
        return self.dispatcher.execute_raw(command, self.credentials, self.transport)

    def build_url(self, command: CFCommand) -> str:
        return self.dispatcher.build_url(command, self.credentials)

    def close(self) -> None:
        if hasattr(self.transport, "close"):
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
