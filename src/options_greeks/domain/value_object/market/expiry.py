"""
到期日相关值对象

描述从行情代码中的到期日文本解析出的结果。
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum


class ExpiryKind(str, Enum):
    """到期日类型"""
    WEEKLY = "weekly"  # "13JAN": 日 + 月
    MONTHLY = "monthly"  # "JAN": 当月最后一个周四
    EXPLICIT = "explicit"  # "20260113" / "2026-01-13"


@dataclass(frozen=True)
class ResolvedExpiry:
    """
    解析后的到期日

    Attributes:
        text: 原始到期日文本
        kind: 到期日类型
        expiry_date: 到期日
    """
    text: str
    kind: ExpiryKind
    expiry_date: date
