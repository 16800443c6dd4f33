"""
domain_service_config_loader.py - 领域服务 TOML 配置加载器

从 config/domain_service/ 目录下的 TOML 文件加载领域服务配置，
并转换为对应的配置值对象。
"""
import logging
from pathlib import Path
from typing import Optional

from src.main.config.config_loader import ConfigLoader
from src.options_greeks.domain.value_object.config.iv_solver_config import IVSolverConfig
from src.options_greeks.domain.value_object.config.options_greeks_config import OptionsGreeksConfig
from src.options_greeks.domain.value_object.risk.risk_level import RiskLevelConfig

logger = logging.getLogger(__name__)

# 项目根目录 (从 src/main/config/domain_service_config_loader.py 向上 4 级)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_DOMAIN_SERVICE_CONFIG_DIR = _PROJECT_ROOT / "config" / "domain_service"


def _load_toml(path: Path) -> dict:
    """加载 TOML 文件，文件不存在时返回空字典"""
    if not path.exists():
        return {}
    data = ConfigLoader.load_toml(str(path))
    logger.info("已加载领域服务配置: %s", path)
    return data


def load_iv_solver_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
) -> IVSolverConfig:
    """
    加载 IV 求解器配置

    优先级: overrides > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "pricing" / "iv_solver.toml")
    overrides = overrides or {}

    newton = data.get("newton", {})
    bounds = data.get("bounds", {})

    kwargs = {}

    # newton
    _map_field(kwargs, "max_iterations", overrides, "max_iterations", newton, "max_iterations")
    _map_field(kwargs, "tolerance", overrides, "tolerance", newton, "tolerance")
    _map_field(kwargs, "initial_guess", overrides, "initial_guess", newton, "initial_guess")

    # bounds
    _map_field(kwargs, "min_volatility", overrides, "min_volatility", bounds, "min")
    _map_field(kwargs, "max_volatility", overrides, "max_volatility", bounds, "max")

    config = IVSolverConfig(**kwargs)
    if config.max_iterations < 0:
        raise ValueError(f"max_iterations 不能为负数: {config.max_iterations}")
    if config.tolerance <= 0:
        raise ValueError(f"tolerance 必须大于 0: {config.tolerance}")
    if not 0 < config.min_volatility <= config.max_volatility:
        raise ValueError(
            f"波动率边界非法: min={config.min_volatility}, max={config.max_volatility}"
        )
    return config


def load_risk_level_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
) -> RiskLevelConfig:
    """
    加载风险等级阈值配置

    优先级: overrides > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "risk" / "risk_level.toml")
    overrides = overrides or {}

    days = data.get("days", {})
    greeks = data.get("greeks", {})

    kwargs = {}

    # days
    _map_field(kwargs, "danger_days", overrides, "danger_days", days, "danger")
    _map_field(kwargs, "caution_days", overrides, "caution_days", days, "caution")
    _map_field(kwargs, "weak_greeks_days", overrides, "weak_greeks_days", days, "weak_greeks")

    # greeks
    _map_field(kwargs, "caution_gamma", overrides, "caution_gamma", greeks, "caution_gamma")
    _map_field(kwargs, "caution_theta", overrides, "caution_theta", greeks, "caution_theta")
    _map_field(kwargs, "weak_theta", overrides, "weak_theta", greeks, "weak_theta")
    _map_field(kwargs, "weak_vega", overrides, "weak_vega", greeks, "weak_vega")

    return RiskLevelConfig(**kwargs)


def load_options_greeks_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> OptionsGreeksConfig:
    """
    加载单腿 Greeks 计算配置

    优先级: overrides > 环境变量 > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "greeks" / "options_greeks.toml")
    overrides = {**ConfigLoader.load_env_overrides(env_path), **(overrides or {})}

    market = data.get("market", {})
    volatility = data.get("volatility", {})
    time = data.get("time", {})

    kwargs = {}

    _map_field(kwargs, "default_risk_free_rate", overrides, "default_risk_free_rate", market, "risk_free_rate")
    _map_field(kwargs, "default_volatility", overrides, "default_volatility", volatility, "default")
    _map_field(kwargs, "historical_lookback_days", overrides, "historical_lookback_days", volatility, "lookback_days")
    _map_field(kwargs, "days_per_year", overrides, "days_per_year", time, "days_per_year")

    ConfigLoader.validate_rate_and_volatility(kwargs)
    return OptionsGreeksConfig(**kwargs)


def _map_field(
    kwargs: dict,
    config_key: str,
    overrides: dict,
    override_key: str,
    toml_section: dict,
    toml_key: str,
) -> None:
    """辅助: 按优先级填充字段 (overrides > toml > 默认值)"""
    if override_key in overrides:
        kwargs[config_key] = overrides[override_key]
    elif toml_key in toml_section:
        kwargs[config_key] = toml_section[toml_key]
