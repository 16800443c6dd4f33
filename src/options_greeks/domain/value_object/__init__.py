"""
Value Object Module

领域层值对象定义。

子模块分类:
- pricing/: 定价相关 (BS 输入、Greeks 结果、IV 求解、单腿 Greeks 输入输出)
- risk/: 风控相关 (风险等级、判定阈值、卖出建议)
- combination/: 组合策略相关 (组合类型、组合 Greeks 结果)
- market/: 市场数据相关 (到期日解析结果)
- config/: 配置相关 (IV 求解器配置、单腿 Greeks 计算配置)
"""

from .pricing.greeks import OptionType, BlackScholesInput, BlackScholesGreeks
from .pricing.iv import FallbackType, IVQuote, IVSolverResult
from .pricing.options_greeks import OptionsGreeksInput, OptionsGreeksResult
from .risk.risk_level import RiskLevel, RiskLevelConfig, SellAdvice
from .combination.combination import CombinationType, CombinedGreeksResult
from .market.expiry import ExpiryKind, ResolvedExpiry
from .config.iv_solver_config import IVSolverConfig
from .config.options_greeks_config import OptionsGreeksConfig

__all__ = [
    # 定价相关
    "OptionType",
    "BlackScholesInput",
    "BlackScholesGreeks",
    "FallbackType",
    "IVQuote",
    "IVSolverResult",
    "OptionsGreeksInput",
    "OptionsGreeksResult",
    # 风控相关
    "RiskLevel",
    "RiskLevelConfig",
    "SellAdvice",
    # 组合相关
    "CombinationType",
    "CombinedGreeksResult",
    # 市场数据相关
    "ExpiryKind",
    "ResolvedExpiry",
    # 配置相关
    "IVSolverConfig",
    "OptionsGreeksConfig",
]
