"""Bit level buffers for decoding and encoding E57 byte streams."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ByteStreamData:
    """A chunk of bits taken from a read buffer.

    ``data`` holds every byte touched by the chunk, ``offset`` is the bit
    position of the first bit inside the first byte.
    """

    data: bytes
    bits: int
    offset: int


class ByteStreamReadBuffer:
    """Accumulates bytes and hands them out again bit by bit."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._offset = 0

    def append(self, data: bytes | bytearray) -> None:
        """Append bytes, dropping bytes that were already fully consumed."""
        consumed = self._offset // 8
        if consumed:
            del self._buffer[:consumed]
            self._offset -= consumed * 8
        self._buffer.extend(data)

    def extract(self, bits: int) -> ByteStreamData | None:
        """Take ``bits`` bits, or return None if not enough are available."""
        if self.available() < bits:
            return None
        start = self._offset // 8
        end = (self._offset + bits + 7) // 8
        offset = self._offset % 8
        data = bytes(self._buffer[start:end])
        self._offset += bits
        return ByteStreamData(data=data, bits=bits, offset=offset)

    def available(self) -> int:
        """Number of bits not yet extracted."""
        return len(self._buffer) * 8 - self._offset


class ByteStreamWriteBuffer:
    """Collects bits and bytes into a packed little-endian bit stream."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._last_byte_bit = 0

    def add_bytes(self, data: bytes | bytearray) -> None:
        """Append whole bytes at the current bit position."""
        if self._last_byte_bit == 0:
            self._buffer.extend(data)
        else:
            self.add_bits(data, len(data) * 8)

    def add_bits(self, data: bytes | bytearray, bits: int) -> None:
        """Append the lowest ``bits`` bits of ``data`` (LSB first)."""
        if self._last_byte_bit == 0:
            self._buffer.extend(data[: (bits + 7) // 8])
            self._last_byte_bit = bits % 8
            return
        start_byte = len(self._buffer) - 1
        start_bit = self._last_byte_bit
        for b in range(bits):
            bit_set = (data[b // 8] >> (b % 8)) & 1
            target = start_byte + (start_bit + b) // 8
            if target >= len(self._buffer):
                self._buffer.append(0)
            if bit_set:
                self._buffer[target] |= 1 << self._last_byte_bit
            self._last_byte_bit = (self._last_byte_bit + 1) % 8

    def get_full_bytes(self) -> bytes:
        """Remove and return all completely filled bytes."""
        count = self.full_bytes()
        taken = bytes(self._buffer[:count])
        del self._buffer[:count]
        return taken

    def get_all_bytes(self) -> bytes:
        """Remove and return every byte, including a partially filled one."""
        self._last_byte_bit = 0
        taken = bytes(self._buffer)
        self._buffer.clear()
        return taken

    def full_bytes(self) -> int:
        """Number of completely filled bytes."""
        length = len(self._buffer)
        return length - 1 if self._last_byte_bit else length

    def all_bytes(self) -> int:
        """Number of bytes including a partially filled one."""
        return len(self._buffer)