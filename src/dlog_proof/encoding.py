"""Length-prefixed decimal wire codec.

Every integer v is written as a 4-byte little-endian length L followed by
L bytes of the ASCII decimal representation of v (with a leading '-' for
negative values). Points and proofs are concatenations of such fields.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable

from dlog_proof.errors import DeserializationError, SerializationError

_LENGTH = struct.Struct("<I")

# Reduced coordinates and responses have at most 78 digits
MAX_FIELD_LENGTH = 128


def encode_int(value: int) -> bytes:
    # bool is an int subclass but never a valid coordinate
    if not isinstance(value, int) or isinstance(value, bool):
        raise SerializationError(f"expected int, got {type(value).__name__}")
    try:
        digits = str(value).encode("ascii")
    except ValueError as exc:
        raise SerializationError(f"integer too large to encode: {exc}") from exc
    if len(digits) > MAX_FIELD_LENGTH:
        raise SerializationError(
            f"integer has {len(digits)} characters, limit is {MAX_FIELD_LENGTH}"
        )
    return _LENGTH.pack(len(digits)) + digits


def encode_ints(values: Iterable[int]) -> bytes:
    return b"".join(encode_int(v) for v in values)


def decode_int(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Read one field starting at offset; return (value, next offset)."""
    end = offset + _LENGTH.size
    if end > len(data):
        raise DeserializationError(
            f"truncated length prefix at offset {offset}"
        )
    (length,) = _LENGTH.unpack_from(data, offset)
    if length == 0:
        raise DeserializationError(f"empty integer field at offset {offset}")
    if length > MAX_FIELD_LENGTH:
        raise DeserializationError(
            f"field at offset {offset} declares {length} bytes, limit is {MAX_FIELD_LENGTH}"
        )
    body = data[end:end + length]
    if len(body) != length:
        raise DeserializationError(
            f"field at offset {offset} declares {length} bytes, {len(body)} available"
        )
    digits = body[1:] if body[:1] == b"-" else body
    if not digits or not digits.isdigit():
        raise DeserializationError(f"non-decimal integer field at offset {offset}")
    return int(body.decode("ascii")), end + length


def decode_ints(data: bytes, count: int) -> list[int]:
    """Decode exactly count fields spanning the whole buffer."""
    values = []
    offset = 0
    for _ in range(count):
        value, offset = decode_int(data, offset)
        values.append(value)
    if offset != len(data):
        raise DeserializationError(
            f"{len(data) - offset} trailing bytes after {count} fields"
        )
    return values
