"""
Pricing Module

期权定价领域服务。

- norm_cdf / norm_pdf / calculate_d1 / calculate_d2: 标准正态分布与 BS 参数
- BlackScholesPricer: Black-Scholes 欧式期权定价器 (价格 + Greeks)
- IVSolver: 隐含波动率求解器 (牛顿法 + 回退链)
- calculate_historical_volatility: 年化历史波动率
"""

from .normal_distribution import norm_cdf, norm_pdf, calculate_d1, calculate_d2
from .bs_pricer import BlackScholesPricer
from .iv.iv_solver import IVSolver
from .volatility.historical_volatility import calculate_historical_volatility

__all__ = [
    "norm_cdf",
    "norm_pdf",
    "calculate_d1",
    "calculate_d2",
    "BlackScholesPricer",
    "IVSolver",
    "calculate_historical_volatility",
]
