"""
标准正态分布函数

Black-Scholes 定价所需的统计函数:
- norm_cdf: 累积分布函数 Φ(x), Abramowitz-Stegun 有理逼近, 最大误差 < 7.5e-8
- norm_pdf: 概率密度函数 φ(x)
- calculate_d1 / calculate_d2: BS 公式中的 d1、d2 参数
"""
import math

# Abramowitz-Stegun 7.1.26 (erf) 系数
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_GAMMA = 0.3275911

_SQRT_2PI = math.sqrt(2.0 * math.pi)
_SQRT_2 = math.sqrt(2.0)


def norm_pdf(x: float) -> float:
    """标准正态分布概率密度函数 φ(x) = e^(-x²/2) / √(2π)"""
    return math.exp(-0.5 * x * x) / _SQRT_2PI


def norm_cdf(x: float) -> float:
    """
    标准正态分布累积分布函数 Φ(x)

    Φ(x) = ½·(1 + erf(x/√2)), erf 采用 Abramowitz-Stegun 7.1.26 逼近:
    z = |x|/√2, t = 1 / (1 + γz),
    erf(z) ≈ 1 - t·(a₁ + t·(a₂ + t·(a₃ + t·(a₄ + t·a₅))))·e^(-z²)。
    erf 误差 < 1.5e-7, 折算到 Φ 为 < 7.5e-8。
    """
    if math.isinf(x):
        return 1.0 if x > 0 else 0.0

    z = abs(x) / _SQRT_2
    t = 1.0 / (1.0 + _GAMMA * z)
    poly = t * (_A1 + t * (_A2 + t * (_A3 + t * (_A4 + t * _A5))))
    erf_z = 1.0 - poly * math.exp(-z * z)

    if x < 0:
        return 0.5 * (1.0 - erf_z)
    return 0.5 * (1.0 + erf_z)


def calculate_d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    d1 = [ln(S/K) + (r + σ²/2)T] / (σ√T)

    到期 (T <= 0) 时 d1 无定义, 按 S - K 的符号返回 ±inf 或 0。
    """
    if T <= 0:
        if S > K:
            return math.inf
        if S < K:
            return -math.inf
        return 0.0

    denominator = sigma * math.sqrt(T)
    if denominator == 0:
        return 0.0

    return (math.log(S / K) + (r + 0.5 * sigma * sigma) * T) / denominator


def calculate_d2(d1: float, sigma: float, T: float) -> float:
    """d2 = d1 - σ√T, 到期时返回 d1"""
    if T <= 0:
        return d1
    return d1 - sigma * math.sqrt(T)
