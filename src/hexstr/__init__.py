"""
Typed hex strings of fixed and variable length.

Example, the md5 of an empty file:

    >>> from hexstr import FixedHexString, HexString
    >>> s = "d41d8cd98f00b204e9800998ecf8427e"
    >>> FixedHexString[16].try_parse(s) == s   # length bound to the type
    True
    >>> HexString.try_parse(s) == s.upper()    # length known at runtime
    True

Optional integrations: ``hexstr.serde`` (pydantic) and ``hexstr.rand``
(random fixtures, hypothesis strategies).
"""
import logging

from .errors import HexStringError, InvalidDigit, OddLength, WrongLength
from .fixed import FixedHexString
from .fmt import Lower, Upper
from .variable import HexString

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "FixedHexString",
    "HexString",
    "HexStringError",
    "InvalidDigit",
    "OddLength",
    "WrongLength",
    "Lower",
    "Upper",
]
