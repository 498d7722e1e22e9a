"""
Random hex strings for fixtures and property tests.

Two sources are supported:
- a ``random.Random`` instance (or the module-level generator), always available;
- hypothesis strategies, when the ``rand`` extra is installed.

Nothing here is meant for keys or other secrets.
"""
from __future__ import annotations

import logging
import random as _random
from typing import Any, Optional, Type, Union

from .fixed import FixedHexString
from .variable import HexString

logger = logging.getLogger(__name__)

FixedSpec = Union[int, Type[FixedHexString]]


def _imp_strategies() -> Any:
    import importlib
    try:
        st = importlib.import_module('hypothesis.strategies')
    except ImportError as e:
        raise ImportError(f'hypothesis not available (pip install "hexstr[rand]"): {e}') from e
    logger.debug('using hypothesis strategies from %s', st.__name__)
    return st


def _fixed_class(spec: FixedSpec) -> Type[FixedHexString]:
    if isinstance(spec, int):
        return FixedHexString[spec]
    if isinstance(spec, type) and issubclass(spec, FixedHexString):
        spec._length()  # unparameterised base raises here
        return spec
    raise TypeError(f"expected a length or a FixedHexString class, got {spec!r}")


def _randbytes(n: int, rng: Optional[_random.Random]) -> bytes:
    src: Any = _random if rng is None else rng
    return src.randbytes(n)


def random_fixed(spec: FixedSpec, rng: Optional[_random.Random] = None) -> FixedHexString:
    """Fill exactly ``LENGTH`` bytes from ``rng``.

    Args:
        spec: a FixedHexString class or a byte length.
        rng: source of randomness; defaults to the ``random`` module.
    """
    cls = _fixed_class(spec)
    return cls(_randbytes(cls.LENGTH, rng))


def random_variable(length: int, rng: Optional[_random.Random] = None, *, cls: Type[HexString] = HexString) -> HexString:
    if length < 0:
        raise ValueError(f"length must be non-negative (got {length})")
    return cls(_randbytes(length, rng))


def fixed_hex_strings(spec: FixedSpec) -> Any:
    """Hypothesis strategy drawing FixedHexString instances of one length."""
    st = _imp_strategies()
    cls = _fixed_class(spec)
    return st.binary(min_size=cls.LENGTH, max_size=cls.LENGTH).map(cls)


def hex_strings(min_size: int = 0, max_size: Optional[int] = None) -> Any:
    """Hypothesis strategy drawing HexString instances, sizes in bytes."""
    st = _imp_strategies()
    return st.binary(min_size=min_size, max_size=max_size).map(HexString)


def hex_text(min_size: int = 0, max_size: Optional[int] = None) -> Any:
    """Hypothesis strategy drawing valid hex text with randomly mixed case."""
    st = _imp_strategies()

    def mix_case(s: str) -> Any:
        flags = st.lists(st.booleans(), min_size=len(s), max_size=len(s))
        return flags.map(lambda fs: ''.join(c.upper() if f else c for c, f in zip(s, fs)))

    return st.binary(min_size=min_size, max_size=max_size).map(bytes.hex).flatmap(mix_case)
