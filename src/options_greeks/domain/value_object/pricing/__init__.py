"""
Pricing 子模块 - 定价相关值对象

包含 BS 定价输入、Greeks 结果、IV 求解报价与结果、单腿 Greeks 输入输出。
"""
from .greeks import OptionType, BlackScholesInput, BlackScholesGreeks
from .iv import FallbackType, IVQuote, IVSolverResult
from .options_greeks import OptionsGreeksInput, OptionsGreeksResult

__all__ = [
    "OptionType",
    "BlackScholesInput",
    "BlackScholesGreeks",
    "FallbackType",
    "IVQuote",
    "IVSolverResult",
    "OptionsGreeksInput",
    "OptionsGreeksResult",
]
