"""
Selection 合约选择领域服务

导出：
- ExpiryResolver: 到期日解析器（周度/月度/显式日期，剩余天数计算）
"""

from src.options_greeks.domain.domain_service.selection.expiry_resolver import ExpiryResolver

__all__ = [
    "ExpiryResolver",
]
