"""
Fixed-length hex strings.

``FixedHexString[N]`` is a class holding exactly N bytes, e.g. an md5 digest:

    >>> Md5 = FixedHexString[16]
    >>> d = Md5.try_parse("d41d8cd98f00b204e9800998ecf8427e")
    >>> d == "D41D8CD98F00B204E9800998ECF8427E"
    True

The size lives on the class (``LENGTH``) and is checked by every constructor.
Subclassing with an explicit ``LENGTH`` works too:

    >>> class Sha256(FixedHexString):
    ...     LENGTH = 32
"""
from __future__ import annotations

import random as _random
import threading
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Type, TypeVar

from .base import BytesLike, HexBytesBase, to_bytes
from .codec import decode_sequence
from .errors import WrongLength

if TYPE_CHECKING:
    from .variable import HexString

F = TypeVar("F", bound="FixedHexString")

_classes: Dict[int, Type["FixedHexString"]] = {}
_classes_lock = threading.Lock()


def _rebuild(length: int, data: bytes) -> "FixedHexString":
    return FixedHexString[length](data)


class FixedHexString(HexBytesBase):
    """Hex string of exactly ``LENGTH`` bytes (``2 * LENGTH`` characters)."""

    __slots__ = ()

    LENGTH: ClassVar[int]

    def __class_getitem__(cls, length: int) -> Type["FixedHexString"]:
        if cls is not FixedHexString:
            raise TypeError(f"{cls.__name__} already has a fixed length")
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"length must be an int, got {type(length).__name__}")
        if length < 0:
            raise ValueError(f"length must be non-negative (got {length})")
        with _classes_lock:
            sub = _classes.get(length)
            if sub is None:
                name = f"FixedHexString[{length}]"
                sub = type(cls)(name, (cls,), {
                    "__slots__": (),
                    "__module__": __name__,
                    "__qualname__": name,
                    "LENGTH": length,
                })
                _classes[length] = sub
        return sub

    def __init__(self, data: BytesLike) -> None:
        expected = self._length()
        b = to_bytes(data)
        if len(b) != expected:
            raise WrongLength(expected, len(b))
        super().__init__(b)

    @classmethod
    def _length(cls) -> int:
        length = getattr(cls, "LENGTH", None)
        if length is None:
            raise TypeError("FixedHexString needs a length: use FixedHexString[N]")
        return length

    @classmethod
    def from_bytes(cls: Type[F], data: BytesLike) -> F:
        """Wrap raw bytes; raises WrongLength (in bytes) on a size mismatch."""
        return cls(data)

    @classmethod
    def try_parse(cls: Type[F], text: str) -> F:
        """Parse ``2 * LENGTH`` hex characters of either case.

        Raises:
            WrongLength: text length is not ``2 * LENGTH`` (checked first).
            InvalidDigit: a non-hex character, with its position.
        """
        return cls._parse(text, "any")

    @classmethod
    def try_parse_lower(cls: Type[F], text: str) -> F:
        return cls._parse(text, "lower")

    @classmethod
    def try_parse_upper(cls: Type[F], text: str) -> F:
        return cls._parse(text, "upper")

    @classmethod
    def _parse(cls: Type[F], text: str, case: str) -> F:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        expected = 2 * cls._length()
        if len(text) != expected:
            raise WrongLength(expected, len(text))
        return cls(decode_sequence(text, case=case))

    @classmethod
    def from_hex_string(cls: Type[F], value: "HexString") -> F:
        """Narrow a variable-length hex string; raises WrongLength on mismatch."""
        return cls(value.as_bytes())

    @classmethod
    def random(cls: Type[F], rng: Optional[_random.Random] = None) -> F:
        """Random instance for fixtures. Not suitable for secrets."""
        from .rand import random_fixed
        return random_fixed(cls, rng)

    def __reduce__(self) -> Any:
        cls = type(self)
        if _classes.get(cls.LENGTH) is cls:
            # generated classes are not importable by name
            return (_rebuild, (cls.LENGTH, self._data))
        return (cls, (self._data,))
