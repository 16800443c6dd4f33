"""
greeks_engine_setup.py - Greeks 计算引擎装配

按 TOML / 环境变量配置组装 IVSolver、RiskLevelClassifier、
OptionsGreeksCalculator 与 CombinationGreeksCalculator。
"""
import logging
from pathlib import Path
from typing import Optional

from src.main.config.domain_service_config_loader import (
    load_iv_solver_config,
    load_options_greeks_config,
    load_risk_level_config,
)
from src.options_greeks.domain.domain_service.combination.combination_greeks_calculator import (
    CombinationGreeksCalculator,
)
from src.options_greeks.domain.domain_service.greeks.options_greeks_calculator import (
    OptionsGreeksCalculator,
)
from src.options_greeks.domain.domain_service.pricing.bs_pricer import BlackScholesPricer
from src.options_greeks.domain.domain_service.pricing.iv.iv_solver import IVSolver
from src.options_greeks.domain.domain_service.risk.risk_level_classifier import RiskLevelClassifier

logger = logging.getLogger(__name__)


def setup_options_greeks_calculator(
    config_dir: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> OptionsGreeksCalculator:
    """
    按配置文件组装单腿 Greeks 计算服务。

    Raises:
        ValueError: 配置取值非法
    """
    iv_config = load_iv_solver_config(config_dir=config_dir)
    risk_config = load_risk_level_config(config_dir=config_dir)
    greeks_config = load_options_greeks_config(config_dir=config_dir, env_path=env_path)

    pricer = BlackScholesPricer()
    calculator = OptionsGreeksCalculator(
        iv_solver=IVSolver(config=iv_config, pricer=pricer),
        pricer=pricer,
        risk_classifier=RiskLevelClassifier(risk_config),
        config=greeks_config,
    )
    logger.info(
        "Greeks 计算引擎已初始化: r=%.4f, 默认波动率=%.4f, IV 容差=%g",
        greeks_config.default_risk_free_rate,
        greeks_config.default_volatility,
        iv_config.tolerance,
    )
    return calculator


def setup_combination_greeks_calculator(
    config_dir: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> CombinationGreeksCalculator:
    """按配置文件组装 Straddle / Strangle 组合 Greeks 计算服务。"""
    return CombinationGreeksCalculator(
        setup_options_greeks_calculator(config_dir=config_dir, env_path=env_path)
    )
