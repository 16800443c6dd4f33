"""
config_loader.py - 配置加载器

支持:
1. TOML 配置文件
2. 环境变量 (.env) 覆盖默认无风险利率、默认波动率
3. 配置验证
"""
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

# 环境变量名 → OptionsGreeksConfig 字段
ENV_OVERRIDES = {
    "OPTIONS_GREEKS_RISK_FREE_RATE": "default_risk_free_rate",
    "OPTIONS_GREEKS_DEFAULT_VOLATILITY": "default_volatility",
}


class ConfigLoader:
    """
    配置加载器

    - 领域服务配置: 从 TOML 文件加载
    - 运行环境覆盖: 从环境变量加载 (.env)
    """

    @staticmethod
    def load_toml(path: str) -> Dict[str, Any]:
        """加载 TOML 配置文件"""
        with open(path, "rb") as f:
            return tomllib.load(f)

    @staticmethod
    def load_env_overrides(env_path: Optional[Path] = None) -> Dict[str, float]:
        """
        从环境变量加载 Greeks 计算配置覆盖值

        未设置的变量不出现在返回值中。

        Raises:
            ValueError: 变量值不是合法数字
        """
        # 从 src/main/config/config_loader.py 到项目根目录需要 4 级 parent
        env_path = env_path or Path(__file__).resolve().parent.parent.parent.parent / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        overrides: Dict[str, float] = {}
        for env_key, field_name in ENV_OVERRIDES.items():
            raw = os.getenv(env_key)
            if not raw:
                continue
            try:
                overrides[field_name] = float(raw)
            except ValueError:
                raise ValueError(f"环境变量 {env_key} 不是合法数字: {raw!r}")

        return overrides

    @staticmethod
    def validate_rate_and_volatility(config: Dict[str, Any]) -> bool:
        """
        验证利率与波动率取值

        Args:
            config: 字段名 → 取值

        Returns:
            True 如果配置有效
        """
        rate = config.get("default_risk_free_rate")
        if rate is not None and not 0 <= rate < 1:
            raise ValueError(f"default_risk_free_rate 超出范围 [0, 1): {rate}")

        volatility = config.get("default_volatility")
        if volatility is not None and volatility <= 0:
            raise ValueError(f"default_volatility 必须大于 0: {volatility}")

        return True
