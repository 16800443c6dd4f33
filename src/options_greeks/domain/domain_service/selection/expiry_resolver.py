"""
ExpiryResolver 领域服务

将行情代码中的到期日文本统一解析为日期, 并计算剩余天数。

支持格式:
- "13JAN": 周度到期, 日 + 月
- "JAN": 月度到期, 取当月最后一个周四
- "20260113" / "2026-01-13": 显式日期

未指定年份时取参考日期所在年份; 若该日期已早于参考日期则顺延到下一年。
"""
import calendar
import re
from datetime import date, datetime
from typing import Optional

from src.options_greeks.domain.value_object.market import ExpiryKind, ResolvedExpiry

_MONTHS = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4,
    "MAY": 5, "JUN": 6, "JUL": 7, "AUG": 8,
    "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

_WEEKLY_PATTERN = re.compile(r"^(\d{1,2})([A-Z]{3})$")
_MONTHLY_PATTERN = re.compile(r"^([A-Z]{3})$")
_COMPACT_PATTERN = re.compile(r"^\d{8}$")
_ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ExpiryResolver:
    """到期日解析器"""

    def resolve(self, text: str, reference_date: Optional[date] = None) -> ResolvedExpiry:
        """
        解析到期日文本

        Args:
            text: 到期日文本, 大小写不敏感
            reference_date: 参考日期, 默认为今天

        Raises:
            ValueError: 无法识别的格式、未知月份或非法日期
        """
        reference = reference_date or date.today()
        normalized = text.strip().upper()

        if _COMPACT_PATTERN.match(normalized):
            expiry = datetime.strptime(normalized, "%Y%m%d").date()
            return ResolvedExpiry(text=text, kind=ExpiryKind.EXPLICIT, expiry_date=expiry)

        if _ISO_PATTERN.match(normalized):
            expiry = date.fromisoformat(normalized)
            return ResolvedExpiry(text=text, kind=ExpiryKind.EXPLICIT, expiry_date=expiry)

        weekly = _WEEKLY_PATTERN.match(normalized)
        if weekly:
            day = int(weekly.group(1))
            month = self._month(weekly.group(2), text)
            expiry = self._roll_forward(
                lambda year: date(year, month, day), reference, text
            )
            return ResolvedExpiry(text=text, kind=ExpiryKind.WEEKLY, expiry_date=expiry)

        monthly = _MONTHLY_PATTERN.match(normalized)
        if monthly:
            month = self._month(monthly.group(1), text)
            expiry = self._roll_forward(
                lambda year: self.last_thursday(year, month), reference, text
            )
            return ResolvedExpiry(text=text, kind=ExpiryKind.MONTHLY, expiry_date=expiry)

        raise ValueError(f"无法识别的到期日格式: {text!r}")

    def days_to_expiry(self, text: str, as_of: Optional[date] = None) -> int:
        """解析到期日并返回距 as_of 的剩余天数"""
        as_of = as_of or date.today()
        expiry = self.resolve(text, as_of).expiry_date
        return self.days_between(as_of, expiry)

    @staticmethod
    def days_between(as_of: date, expiry_date: date) -> int:
        """剩余日历天数, 已过期时为 0"""
        return max(0, (expiry_date - as_of).days)

    @staticmethod
    def last_thursday(year: int, month: int) -> date:
        """当月最后一个周四 (月度期权到期日)"""
        last_day = calendar.monthrange(year, month)[1]
        last_date = date(year, month, last_day)
        offset = (last_date.weekday() - calendar.THURSDAY) % 7
        return date(year, month, last_day - offset)

    @staticmethod
    def _month(code: str, text: str) -> int:
        if code not in _MONTHS:
            raise ValueError(f"未知的月份代码 {code!r}: {text!r}")
        return _MONTHS[code]

    @staticmethod
    def _roll_forward(build, reference: date, text: str) -> date:
        """取参考年份的日期, 已过去则顺延一年"""
        try:
            expiry = build(reference.year)
            if expiry < reference:
                expiry = build(reference.year + 1)
        except ValueError as e:
            raise ValueError(f"非法的到期日 {text!r}: {e}") from e
        return expiry
