"""
卖方风险等级判定服务

基于剩余天数和单腿 Greeks 判定卖方风险等级, 按顺序匹配, 先命中者生效:
1. DTE <= 7 → danger (临近到期, gamma 爆发风险)
2. DTE <= 14 或 gamma > 0.008 或 theta > -0.5 → caution
3. DTE <= 20 且 (theta < 0.3 或 |vega| < 0.3) → caution (Greeks 偏弱)
4. 其余 → safe
"""
from typing import Optional

from src.options_greeks.domain.value_object.pricing.greeks import BlackScholesGreeks
from src.options_greeks.domain.value_object.risk import RiskLevel, RiskLevelConfig, SellAdvice


_SELL_ADVICE = {
    RiskLevel.SAFE: SellAdvice(
        risk_level=RiskLevel.SAFE,
        badge="SAFE TO SELL",
        action="Theta 强劲且风险可控, 可以卖出, 目标止盈 50%",
    ),
    RiskLevel.CAUTION: SellAdvice(
        risk_level=RiskLevel.CAUTION,
        badge="CAUTION - Close Soon",
        action="Gamma 上升, 建议在 2-3 天内平仓",
    ),
    RiskLevel.DANGER: SellAdvice(
        risk_level=RiskLevel.DANGER,
        badge="DANGER - Close Position",
        action="临近到期 gamma 爆发风险, 立即平仓",
    ),
}


class RiskLevelClassifier:
    """卖方风险等级判定器"""

    def __init__(self, config: Optional[RiskLevelConfig] = None) -> None:
        self._config = config or RiskLevelConfig()

    def classify(self, days_to_expiry: int, greeks: BlackScholesGreeks) -> RiskLevel:
        cfg = self._config

        if days_to_expiry <= cfg.danger_days:
            return RiskLevel.DANGER

        if (
            days_to_expiry <= cfg.caution_days
            or greeks.gamma > cfg.caution_gamma
            or greeks.theta > cfg.caution_theta
        ):
            return RiskLevel.CAUTION

        if days_to_expiry <= cfg.weak_greeks_days and (
            greeks.theta < cfg.weak_theta or abs(greeks.vega) < cfg.weak_vega
        ):
            return RiskLevel.CAUTION

        return RiskLevel.SAFE

    @staticmethod
    def advise(risk_level: RiskLevel) -> SellAdvice:
        """风险等级 → 卖出建议"""
        return _SELL_ADVICE[risk_level]
