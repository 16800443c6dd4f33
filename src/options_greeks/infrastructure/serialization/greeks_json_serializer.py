"""Greeks 结果 JSON 序列化器，供 HTTP 层输出给浏览器仪表盘。

类型转换规则:
| Python 类型    | JSON 表示                                  |
|---------------|-------------------------------------------|
| dataclass     | camelCase 字段名的对象 (递归)                 |
| Enum          | 枚举值, 如 "call" / "danger"                 |
| date/datetime | ISO 8601 字符串                              |
| pd.DataFrame  | records 列表 (list of dicts, 列名转 camelCase) |
| None          | null                                       |

同时负责把请求体 (camelCase) 解析为 OptionsGreeksInput。
"""

import dataclasses
import json
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Union

import pandas as pd

from src.options_greeks.domain.value_object.pricing import OptionsGreeksInput, OptionType

# 请求中可能出现的期权类型写法
_OPTION_TYPE_ALIASES = {
    "call": OptionType.CALL,
    "ce": OptionType.CALL,
    "put": OptionType.PUT,
    "pe": OptionType.PUT,
}

_REQUIRED_INPUT_KEYS = ("spotPrice", "strikePrice", "marketPrice", "optionType", "daysToExpiry")

_BOOL_STRINGS = {"true": True, "false": False}


def to_camel(name: str) -> str:
    """snake_case → camelCase"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _parse_bool(value: Any) -> bool:
    """只接受 JSON 布尔值或 "true" / "false" 字符串"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _BOOL_STRINGS:
        return _BOOL_STRINGS[value.strip().lower()]
    raise ValueError(f"无法识别的布尔值: {value!r}")


def _convert(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(f.name): _convert(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }

    if isinstance(value, pd.DataFrame):
        frame = value.rename(columns=lambda col: to_camel(str(col)))
        return [_convert(record) for record in frame.to_dict(orient="records")]

    if isinstance(value, dict):
        return {key: _convert(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    # DataFrame 中的缺失值
    if isinstance(value, float) and math.isnan(value):
        return None

    return value


class _GreeksEncoder(json.JSONEncoder):
    """自定义 JSON 编码器，处理 dataclass、Enum、datetime、DataFrame。"""

    def default(self, o: Any) -> Any:
        if isinstance(o, pd.Timestamp):
            return o.isoformat()

        # numpy 标量
        if hasattr(o, "item"):
            return o.item()

        if isinstance(o, (Enum, datetime, date, pd.DataFrame)) or (
            dataclasses.is_dataclass(o) and not isinstance(o, type)
        ):
            return _convert(o)

        return super().default(o)


class GreeksJsonSerializer:
    """Greeks 结果 / 请求体的 JSON 转换器。"""

    def to_dict(self, result: Any) -> Any:
        """转换为可直接 json.dumps 的 camelCase 结构。"""
        return _convert(result)

    def serialize(self, result: Any) -> str:
        """序列化为 JSON 字符串。"""
        return json.dumps(self.to_dict(result), cls=_GreeksEncoder, ensure_ascii=False)

    def parse_input(self, payload: Union[str, Dict[str, Any]]) -> OptionsGreeksInput:
        """从请求体解析单腿输入。

        Raises:
            ValueError: 缺少必填字段、期权类型无法识别或布尔字段取值非法
        """
        data = json.loads(payload) if isinstance(payload, str) else payload

        missing = [key for key in _REQUIRED_INPUT_KEYS if key not in data]
        if missing:
            raise ValueError(f"请求缺少必填字段: {missing}")

        option_type = _OPTION_TYPE_ALIASES.get(str(data["optionType"]).strip().lower())
        if option_type is None:
            raise ValueError(f"无法识别的期权类型: {data['optionType']!r}")

        kwargs: Dict[str, Any] = {
            "spot_price": float(data["spotPrice"]),
            "strike_price": float(data["strikePrice"]),
            "market_price": float(data["marketPrice"]),
            "option_type": option_type,
            "days_to_expiry": int(data["daysToExpiry"]),
        }
        if data.get("riskFreeRate") is not None:
            kwargs["risk_free_rate"] = float(data["riskFreeRate"])
        if data.get("historicalSpotPrices") is not None:
            kwargs["historical_spot_prices"] = tuple(
                float(price) for price in data["historicalSpotPrices"]
            )
        if "useImpliedVolatility" in data:
            kwargs["use_implied_volatility"] = _parse_bool(data["useImpliedVolatility"])

        return OptionsGreeksInput(**kwargs)
