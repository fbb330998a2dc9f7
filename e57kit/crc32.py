"""CRC-32C (iSCSI/Castagnoli) checksum as used by E57 pages."""

from __future__ import annotations

_POLYNOMIAL = 0x82F63B78


def _build_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        for _ in range(8):
            value = (value >> 1) ^ _POLYNOMIAL if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


_TABLE = _build_table()


class Crc32:
    """Table driven CRC-32C calculator."""

    def __init__(self) -> None:
        self.table = _TABLE

    def calculate(self, data: bytes | bytearray | memoryview) -> int:
        """Return the CRC-32C checksum of ``data``."""
        crc = 0xFFFFFFFF
        table = self.table
        for byte in bytes(data):
            crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
        return crc ^ 0xFFFFFFFF


def crc32c(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC-32C checksum of ``data``."""
    return Crc32().calculate(data)