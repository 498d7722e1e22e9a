"""
Hex codec core (small, focused)

Goals
- Convert between one byte and its two-character hex form.
- Decode whole hex strings with precise errors (odd length, first bad digit).
- Accept both cases on input, emit lowercase unless asked otherwise.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable

from .errors import InvalidDigit, OddLength

_HEX_RE = re.compile(r"[0-9a-fA-F]*")

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

# Digit tables per accepted case
_TABLES: Dict[str, Dict[str, int]] = {
    "lower": {c: i for i, c in enumerate(_LOWER_DIGITS)},
    "upper": {c: i for i, c in enumerate(_UPPER_DIGITS)},
}
_TABLES["any"] = {**_TABLES["lower"], **_TABLES["upper"]}

# Precomputed byte -> text
_ENCODE_LOWER = tuple(f"{b:02x}" for b in range(256))
_ENCODE_UPPER = tuple(f"{b:02X}" for b in range(256))


def _table(case: str) -> Dict[str, int]:
    try:
        return _TABLES[case]
    except KeyError:
        raise ValueError(f"case must be one of 'any', 'lower', 'upper' (got {case!r})") from None


def is_hex_str(s: str) -> bool:
    """True if ``s`` is even-length text made of hex digits only (empty is fine)."""
    return isinstance(s, str) and len(s) % 2 == 0 and _HEX_RE.fullmatch(s) is not None


def digit_value(c: str, *, case: str = "any") -> int:
    """Value in [0, 15] of a single hex digit.

    Raises:
        InvalidDigit: if ``c`` is not exactly one accepted hex character.
    """
    v = _table(case).get(c)
    if v is None:
        raise InvalidDigit(c)
    return v


def decode_byte(hi: str, lo: str, *, case: str = "any") -> int:
    return digit_value(hi, case=case) * 16 + digit_value(lo, case=case)


def encode_byte(b: int, *, upper: bool = False) -> str:
    if not 0 <= b <= 0xFF:
        raise ValueError(f"byte value out of range: {b}")
    return _ENCODE_UPPER[b] if upper else _ENCODE_LOWER[b]


def decode_sequence(text: str, *, case: str = "any") -> bytes:
    """Decode hex text into bytes.

    Args:
        text: hex characters, no prefix or separators.
        case: 'any' (default) accepts both cases, 'lower'/'upper' only one.

    Returns:
        The decoded bytes, one per character pair.

    Raises:
        OddLength: text has an odd number of characters (checked first).
        InvalidDigit: first non-hex character, with its position.
    """
    table = _table(case)
    n = len(text)
    if n % 2 != 0:
        raise OddLength(n)
    out = bytearray(n // 2)
    for i in range(0, n, 2):
        hi = table.get(text[i])
        if hi is None:
            raise InvalidDigit(text[i], i)
        lo = table.get(text[i + 1])
        if lo is None:
            raise InvalidDigit(text[i + 1], i + 1)
        out[i // 2] = hi << 4 | lo
    return bytes(out)


def encode_sequence(data: Iterable[int], *, upper: bool = False) -> str:
    table = _ENCODE_UPPER if upper else _ENCODE_LOWER
    return "".join(table[b] for b in data)
