"""
Variable-length hex strings.

    >>> v = HexString.try_parse("d41d8cd98f00b204e9800998ecf8427e")
    >>> len(v)
    16
    >>> v == "D41D8CD98F00B204E9800998ECF8427E"
    True
"""
from __future__ import annotations

import random as _random
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar

from .base import BytesLike, HexBytesBase
from .codec import decode_sequence

if TYPE_CHECKING:
    from .fixed import FixedHexString

V = TypeVar("V", bound="HexString")


class HexString(HexBytesBase):
    """Hex string of any length, including empty."""

    __slots__ = ()

    @classmethod
    def from_bytes(cls: Type[V], data: BytesLike) -> V:
        return cls(data)

    @classmethod
    def try_parse(cls: Type[V], text: str) -> V:
        """Parse even-length hex text of either case.

        Raises:
            OddLength: odd number of characters, whatever they are.
            InvalidDigit: a non-hex character, with its position.
        """
        return cls._parse(text, "any")

    @classmethod
    def try_parse_lower(cls: Type[V], text: str) -> V:
        return cls._parse(text, "lower")

    @classmethod
    def try_parse_upper(cls: Type[V], text: str) -> V:
        return cls._parse(text, "upper")

    @classmethod
    def _parse(cls: Type[V], text: str, case: str) -> V:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls(decode_sequence(text, case=case))

    @classmethod
    def from_fixed(cls: Type[V], value: "FixedHexString") -> V:
        return cls(value.as_bytes())

    @classmethod
    def random(cls: Type[V], length: int, rng: Optional[_random.Random] = None) -> V:
        """Random instance of ``length`` bytes for fixtures. Not suitable for secrets."""
        from .rand import random_variable
        return random_variable(length, rng, cls=cls)

    def __reduce__(self) -> Any:
        return (type(self), (self._data,))
