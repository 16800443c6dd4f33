"""
Config 子模块 - 配置值对象

包含 IV 求解器配置、单腿 Greeks 计算配置。
"""
from .iv_solver_config import IVSolverConfig
from .options_greeks_config import OptionsGreeksConfig

__all__ = [
    "IVSolverConfig",
    "OptionsGreeksConfig",
]
