# -*- coding: utf-8 -*-
"""
自定义异常类
每一种失败都有独立的异常类型，调用方可以按类型区分处理
"""

from typing import Optional, Dict, Any


class CFAPIException(Exception):
    """cfapi 基础异常类"""

    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "内部错误",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式（用于日志或上层序列化）"""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


# ==================== 调用方输入 ====================

class InvalidParameterError(CFAPIException):
    """参数不合法（在任何网络/签名操作之前检测）"""
    error_code = "INVALID_PARAMETER"

    def __init__(self, param: str, message: str = "参数不合法"):
        super().__init__(message, {"param": param})
        self.param = param


# ==================== 传输层 ====================

class TransportError(CFAPIException):
    """网络错误（连接失败、超时、服务端5xx）"""
    error_code = "TRANSPORT_ERROR"

    def __init__(self, message: str = "无法连接到Codeforces", url: Optional[str] = None):
        super().__init__(message, {"url": url} if url else None)


# ==================== 应用层 ====================

class ApiError(CFAPIException):
    """服务端返回 status=FAILED"""
    error_code = "API_ERROR"

    def __init__(self, comment: str):
        super().__init__(f"Codeforces API: {comment}", {"comment": comment})
        self.comment = comment


# ==================== 解码 ====================

class DecodeError(CFAPIException):
    """响应结构与命令期望的结果类型不符"""
    error_code = "DECODE_ERROR"

    def __init__(self, field_path: str, message: str = "响应解码失败"):
        super().__init__(f"{message}: {field_path}", {"field_path": field_path})
        self.field_path = field_path


class ResultMismatchError(DecodeError):
    """结果标签与命令声明的不一致（内部一致性缺陷）"""
    error_code = "RESULT_MISMATCH"

    def __init__(self, expected: str, actual: str):
        super().__init__("result", f"期望结果类型 {expected}，实际为 {actual}")
        self.details.update({"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
