"""IVSolverConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IVSolverConfig:
    """牛顿法 IV 求解器配置"""

    max_iterations: int = 100  # 最大迭代次数 (通常 5-10 次即收敛)
    tolerance: float = 0.0001  # 价格收敛容差
    initial_guess: float = 0.20  # 初始波动率猜测
    min_volatility: float = 0.01  # 波动率下限
    max_volatility: float = 3.0  # 波动率上限
