"""
Errors raised while parsing hex text or building hex strings.

All failures derive from HexStringError, itself a ValueError, so callers that
already guard hex input with ``except ValueError`` keep working.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple


class HexStringError(ValueError):
    """Base class for every hex string failure. Never raised directly."""

    def _key(self) -> Tuple[Any, ...]:
        return tuple(self.args)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __reduce__(self) -> Any:
        return (type(self), self._key())


class InvalidDigit(HexStringError):
    """A character outside ``[0-9a-fA-F]`` was found during decoding.

    Attributes:
        char: the offending character.
        position: 0-based index into the input text, or None when unknown.
    """

    def __init__(self, char: str, position: Optional[int] = None) -> None:
        self.char = char
        self.position = position
        if position is None:
            msg = f"non-hex character {char!r}"
        else:
            msg = f"non-hex character {char!r} at position {position}"
        super().__init__(msg)

    def _key(self) -> Tuple[Any, ...]:
        return (self.char, self.position)


class OddLength(HexStringError):
    """Hex text has an odd number of characters."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"hex string must have even length (got {length})")

    def _key(self) -> Tuple[Any, ...]:
        return (self.length,)


class WrongLength(HexStringError):
    """Input does not match the length a fixed-size hex string requires.

    ``expected`` and ``actual`` are in characters when parsing text and in
    bytes when building from raw bytes.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected length {expected} (got {actual})")

    def _key(self) -> Tuple[Any, ...]:
        return (self.expected, self.actual)
