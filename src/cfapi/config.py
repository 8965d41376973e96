# -*- coding: utf-8 -*-
"""
客户端配置

加载顺序（后者覆盖前者）：
1. AppConfig 默认值
2. JSON 配置文件（默认 cfapi.json）
3. 环境变量（先由 python-dotenv 加载 .env）

使用方式：
    from cfapi.config import get_config

    cfg = get_config()
    creds = cfg.credentials()
"""

from __future__ import annotations

import json
import os
import threading
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from .auth.credentials import Credentials
from .exceptions import InvalidParameterError

DEFAULT_CONFIG_FILE = "cfapi.json"

# 环境变量 -> 配置字段
ENV_FIELDS = {
    "CF_API_KEY": "api_key",
    "CF_API_SECRET": "api_secret",
    "CF_API_BASE_URL": "api_base_url",
    "CF_API_TIMEOUT": "timeout",
    "CF_LOG_LEVEL": "log_level",
}


@dataclass
class ClientConfig:
    """客户端配置（唯一定义）"""
    api_base_url: str = "https://codeforces.com/api/"
    timeout: int = 30

    # 代理 & SSL
    proxies: Optional[Dict[str, str]] = None
    verify_ssl: bool = True

    log_level: str = "INFO"

    # 凭据（api_secret 不写入日志）
    api_key: str = ""
    api_secret: str = ""

    def credentials(self) -> Credentials:
        if not self.api_key or not self.api_secret:
            raise InvalidParameterError("apiKey", "未配置 API key/secret（CF_API_KEY / CF_API_SECRET）")
        return Credentials(api_key=self.api_key, api_secret=self.api_secret)


def _read_file(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        logger.warning(f"[Config] 配置文件格式错误（应为JSON对象）: {config_path}")
        return {}
    return data


def load_config(path: Optional[Path] = None) -> ClientConfig:
    """从默认值、配置文件、环境变量构建配置"""
    values = asdict(ClientConfig())
    values.update(_read_file(Path(path or DEFAULT_CONFIG_FILE)))

    load_dotenv(find_dotenv(usecwd=True))
    for env_name, field_name in ENV_FIELDS.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[field_name] = env_value

    # 过滤掉 ClientConfig 中不存在的字段
    valid_fields = {f.name for f in fields(ClientConfig)}
    unknown = set(values) - valid_fields
    if unknown:
        logger.debug(f"[Config] 忽略未知字段: {unknown}")

    cfg = ClientConfig(**{k: v for k, v in values.items() if k in valid_fields})
    cfg.timeout = int(cfg.timeout)
    return cfg


_config: Optional[ClientConfig] = None
_config_lock = threading.Lock()


def get_config() -> ClientConfig:
    """进程内缓存的配置"""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = load_config()
    return _config


def reset_config() -> None:
    global _config
    with _config_lock:
        _config = None
