"""
Market 子模块 - 市场数据相关值对象

包含到期日解析结果。
"""
from .expiry import ExpiryKind, ResolvedExpiry

__all__ = [
    "ExpiryKind",
    "ResolvedExpiry",
]
