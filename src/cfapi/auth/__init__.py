# -*- coding: utf-8 -*-
"""请求认证：规范化参数编码与签名"""

from .credentials import Credentials
from .params import LIST_SEPARATOR, RESERVED_PARAMS, canonicalize, to_query_string
from .signer import Signer, SignedRequest, compute_signature, random_nonce, system_clock

__all__ = [
    "Credentials",
    "LIST_SEPARATOR",
    "RESERVED_PARAMS",
    "canonicalize",
    "to_query_string",
    "Signer",
    "SignedRequest",
    "compute_signature",
    "random_nonce",
    "system_clock",
]
