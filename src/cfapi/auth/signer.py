# -*- coding: utf-8 -*-
"""请求签名

apiSig = rand + sha512("{rand}/{methodName}?{canonical_params}#{secret}")

canonical_params 已包含 apiKey 与 time，因此 apiSig 必须最后计算。
时钟与随机数来源均可注入，固定二者即可得到确定的签名。
"""

from __future__ import annotations

import hashlib
import secrets
import string
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .credentials import Credentials
from .params import EncodedPairs, ParamValue, canonicalize, merge_params, to_query_string

NONCE_LENGTH = 6

Clock = Callable[[], int]
NonceSource = Callable[[], str]


def system_clock() -> int:
    """当前 UNIX 时间（秒）"""
    return int(time.time())


def random_nonce() -> str:
    """每次调用独立生成的6位数字串（secrets 无共享计数器，可并发调用）"""
    return "".join(secrets.choice(string.digits) for _ in range(NONCE_LENGTH))


def compute_signature(nonce: str, method_name: str, query: str, secret: str) -> str:
    """计算 apiSig（nonce + 小写十六进制 SHA-512 摘要）"""
    to_hash = f"{nonce}/{method_name}?{query}#{secret}"
    digest = hashlib.sha512(to_hash.encode("utf-8")).hexdigest()
    return nonce + digest


@dataclass(frozen=True)
class SignedRequest:
    """一次调用的最终参数集合，用完即弃"""
    method_name: str
    pairs: EncodedPairs
    api_sig: str

    @property
    def query_string(self) -> str:
        """实际发送的查询串：签名所用的规范串 + apiSig"""
        return f"{to_query_string(self.pairs)}&apiSig={self.api_sig}"

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.method_name}?{self.query_string}"


class Signer:
    """签名生成器（无可变状态，可在线程间共享）"""

    def __init__(self, clock: Optional[Clock] = None, nonce_source: Optional[NonceSource] = None):
        self.clock = clock or system_clock
        self.nonce_source = nonce_source or random_nonce

    def sign(
        self,
        method_name: str,
        params: Mapping[str, Optional[ParamValue]],
        credentials: Credentials,
    ) -> SignedRequest:
        # 先校验命令参数（拒绝保留名），再并入 apiKey/time
        canonicalize(params)
        auth_params = {"apiKey": credentials.api_key, "time": int(self.clock())}
        pairs = canonicalize(merge_params(params, auth_params), allow_reserved=True)

        nonce = self.nonce_source()
        api_sig = compute_signature(nonce, method_name, to_query_string(pairs), credentials.api_secret)
        return SignedRequest(method_name=method_name, pairs=pairs, api_sig=api_sig)
