"""
Behaviour shared by the fixed- and variable-length hex string types.

Both types keep the raw bytes as the source of truth; hex text is produced on
demand. Instances are immutable and hashable.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Union, overload

from .codec import encode_sequence, is_hex_str
from .fmt import Lower, Upper

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def to_bytes(data: Any) -> bytes:
    """Copy ``data`` into immutable bytes, refusing text and bare ints."""
    if isinstance(data, HexBytesBase):
        return data.as_bytes()
    if isinstance(data, (str, int)):
        # bytes("ab") fails late and bytes(5) means five zero bytes
        raise TypeError(f"expected bytes-like or iterable of ints, got {type(data).__name__}")
    return bytes(data)


class HexBytesBase:
    __slots__ = ("_data",)

    _data: bytes

    def __init__(self, data: BytesLike = b"") -> None:
        object.__setattr__(self, "_data", to_bytes(data))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def as_bytes(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[int, bytes]:
        return self._data[index]

    def to_hex_string(self) -> str:
        """Canonical text: two lowercase digits per byte."""
        return encode_sequence(self._data)

    def to_upper(self) -> str:
        return encode_sequence(self._data, upper=True)

    def as_lower(self) -> Lower:
        return Lower(self._data)

    def as_upper(self) -> Upper:
        return Upper(self._data)

    def __str__(self) -> str:
        return self.to_hex_string()

    def __format__(self, spec: str) -> str:
        # "x" / "X" pick the case, anything else applies to the lowercase text
        if spec == "x":
            return self.to_hex_string()
        if spec == "X":
            return self.to_upper()
        return format(self.to_hex_string(), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex_string()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HexBytesBase):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == other
        if isinstance(other, str):
            # text compares case-insensitively against the canonical form
            return is_hex_str(other) and other.lower() == self.to_hex_string()
        return NotImplemented

    def __hash__(self) -> int:
        """Hash of the raw bytes.

        Equality with text does not carry over to dict or set lookups:
        ``{HexString(b"\\xab"): 1}.get("ab")`` misses, since str hashes differ.
        """
        return hash(self._data)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from .serde import hex_core_schema
        return hex_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Any:
        from .serde import hex_json_schema
        return hex_json_schema(cls)
