"""Unpacking of bit-packed values from E57 byte streams."""

from __future__ import annotations

import struct

from .bytestream import ByteStreamReadBuffer
from .errors import InternalError, InvalidError, NotImplementedE57Error


def _unpack_fp(stream: ByteStreamReadBuffer, fmt: str, bits: int, type_name: str) -> list[float]:
    available = stream.available()
    if available % bits != 0:
        raise InvalidError(
            f"Available bits {available} do not match expected type size of {bits} bits"
        )
    values = []
    for _ in range(available // bits):
        chunk = stream.extract(bits)
        if chunk is None:
            raise InternalError(
                f"Unexpected error when extracing {type_name} from byte stream"
            )
        values.append(struct.unpack(fmt, chunk.data)[0])
    return values


def _unpack_int(stream: ByteStreamReadBuffer, min_value: int, max_value: int) -> list[int]:
    value_range = max_value - min_value
    if value_range < 1:
        raise InvalidError(
            f"Integer range from {min_value} to {max_value} cannot be unpacked"
        )
    bit_size = value_range.bit_length()
    if bit_size > 56 and bit_size != 64:
        # Such values may span nine bytes before alignment.
        raise NotImplementedE57Error(f"Integers with {bit_size} bits are not supported")
    mask = (1 << bit_size) - 1
    values = []
    while stream.available() >= bit_size:
        chunk = stream.extract(bit_size)
        if chunk is None:
            raise InternalError("Unexpected error when extracing integer from byte stream")
        raw = (int.from_bytes(chunk.data, "little") >> chunk.offset) & mask
        if bit_size == 64 and raw >= 1 << 63:
            raw -= 1 << 64
        values.append(raw + min_value)
    return values


def unpack_doubles(stream: ByteStreamReadBuffer) -> list[float]:
    """Unpack all available bits as little-endian 64-bit floats."""
    return _unpack_fp(stream, "<d", 64, "f64")


def unpack_singles(stream: ByteStreamReadBuffer) -> list[float]:
    """Unpack all available bits as little-endian 32-bit floats."""
    return _unpack_fp(stream, "<f", 32, "f32")


def unpack_ints(stream: ByteStreamReadBuffer, min_value: int, max_value: int) -> list[int]:
    """Unpack integers packed with the minimal bit width for the given range."""
    return _unpack_int(stream, min_value, max_value)


def unpack_scaled_ints(
    stream: ByteStreamReadBuffer, min_value: int, max_value: int
) -> list[int]:
    """Unpack the raw (unscaled) integers of a scaled integer field."""
    return _unpack_int(stream, min_value, max_value)