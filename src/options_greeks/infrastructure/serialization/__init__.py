"""Serialization 子模块 - Greeks 结果 JSON 序列化。"""

from .greeks_json_serializer import GreeksJsonSerializer, to_camel

__all__ = ["GreeksJsonSerializer", "to_camel"]
