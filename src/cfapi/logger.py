# -*- coding: utf-8 -*-
"""日志配置

cfapi 内部的日志默认是关闭的（包导入时 logger.disable("cfapi")），
调用方不做任何配置时不会看到库的输出。需要日志时：

    from cfapi.logger import configure_logger
    configure_logger()            # 级别取自 ClientConfig.log_level（CF_LOG_LEVEL）

日志目录依次取 logs_dir 参数、环境变量 CFAPI_LOGS_DIR、默认的 logs。
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import ClientConfig, get_config
from .exceptions import InvalidParameterError

LOG_FILE = "cfapi.log"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def resolve_level(level: Optional[str]) -> str:
    """把配置里的级别名转成 loguru 的级别名，未知级别直接报错"""
    name = (level or "INFO").strip().upper()
    try:
        logger.level(name)
    except ValueError as e:
        raise InvalidParameterError("log_level", f"未知的日志级别: {level}") from e
    return name


def configure_logger(config: Optional[ClientConfig] = None, logs_dir: Optional[str] = None):
    """按配置安装 stderr 与滚动文件两个 sink，并打开 cfapi 的日志"""
    level = resolve_level((config or get_config()).log_level)
    logs_path = Path(logs_dir or os.getenv("CFAPI_LOGS_DIR") or "logs")
    logs_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.add(str(logs_path / LOG_FILE), level=level, format=LOG_FORMAT,
               rotation="5 MB", retention=5, enqueue=True, encoding="utf-8")
    logger.enable("cfapi")
    logger.debug(f"CFApi: 日志已配置 level={level}, dir={logs_path}")
    return logger
