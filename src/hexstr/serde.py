"""
pydantic (v2) integration, loaded only when a hex string type appears in a model.

    class Example(BaseModel):
        md5: FixedHexString[16]

Validation accepts hex text (parsed with ``try_parse``), raw bytes, or an
existing hex string. Serialization always emits the lowercase hex text.
Parse failures surface as ``pydantic.ValidationError``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Type

from .base import HexBytesBase
from .fixed import FixedHexString

logger = logging.getLogger(__name__)

HEX_PATTERN = r"^(?:[0-9a-fA-F]{2})*$"


def _imp_core_schema() -> Any:
    import importlib
    try:
        return importlib.import_module('pydantic_core').core_schema
    except ImportError as e:
        raise ImportError(f'pydantic not available (pip install "hexstr[serde]"): {e}') from e


def make_validator(cls: Type[HexBytesBase]) -> Callable[[Any], HexBytesBase]:
    """Decode hook: text goes through ``try_parse``; errors are ValueErrors."""

    def validate(value: Any) -> HexBytesBase:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.try_parse(value)  # type: ignore[attr-defined]
        if isinstance(value, (bytes, bytearray, memoryview, HexBytesBase)):
            return cls.from_bytes(value)  # type: ignore[attr-defined]
        raise ValueError(f"expected hex string, got {type(value).__name__}")

    return validate


def serialize(value: HexBytesBase) -> str:
    """Encode hook."""
    return value.to_hex_string()


def hex_core_schema(cls: Type[HexBytesBase]) -> Any:
    cs = _imp_core_schema()
    logger.debug('building pydantic core schema for %s', cls.__name__)
    return cs.no_info_plain_validator_function(
        make_validator(cls),
        serialization=cs.plain_serializer_function_ser_schema(
            serialize,
            return_schema=cs.str_schema(),
        ),
    )


def hex_json_schema(cls: Type[HexBytesBase]) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "string", "pattern": HEX_PATTERN}
    if issubclass(cls, FixedHexString):
        n = 2 * cls._length()
        schema["minLength"] = n
        schema["maxLength"] = n
    return schema
