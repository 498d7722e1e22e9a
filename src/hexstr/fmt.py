"""
Case-specific text views over a byte sequence.

A view holds the bytes and renders them on demand, so ``str(x.as_upper())``
can be passed to log calls or f-strings without building the text up front.
"""
from __future__ import annotations

from .codec import encode_sequence


class _CaseView:
    __slots__ = ("_data",)
    _upper = False

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def __str__(self) -> str:
        return encode_sequence(self._data, upper=self._upper)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __len__(self) -> int:
        return 2 * len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, _CaseView):
            return self._upper == other._upper and self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


class Lower(_CaseView):
    """Lowercase rendering, e.g. ``d41d8c``."""

    __slots__ = ()


class Upper(_CaseView):
    """Uppercase rendering, e.g. ``D41D8C``."""

    __slots__ = ()
    _upper = True
