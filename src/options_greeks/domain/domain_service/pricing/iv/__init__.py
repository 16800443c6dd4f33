"""IV（隐含波动率）求解子模块。"""

from .iv_solver import IVSolver

__all__ = ["IVSolver"]
