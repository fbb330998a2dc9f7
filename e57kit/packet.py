"""Packet headers found inside compressed vector sections."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Union

from .errors import InvalidError, ReadError, WriteError


def _read_exact(reader: BinaryIO, size: int, desc: str) -> bytes:
    try:
        data = reader.read(size)
    except OSError as exc:
        raise ReadError(desc) from exc
    if data is None or len(data) != size:
        raise ReadError(desc)
    return data


def _check_length(packet_length: int, kind: str) -> None:
    if packet_length % 4 != 0:
        raise InvalidError(f"{kind} packet length is not aligned and a multiple of four")


@dataclass
class IndexPacketHeader:
    """Header of an index packet."""

    packet_length: int
    entry_count: int
    index_level: int

    @classmethod
    def read(cls, reader: BinaryIO) -> IndexPacketHeader:
        """Read the header bytes that follow the packet type byte."""
        data = _read_exact(reader, 15, "Failed to read index packet header")
        length, entry_count, index_level = struct.unpack_from("<HHB", data, 1)
        packet_length = length + 1
        _check_length(packet_length, "Index")
        return cls(packet_length, entry_count, index_level)


@dataclass
class DataPacketHeader:
    """Header of a data packet."""

    SIZE: ClassVar[int] = 6

    comp_restart_flag: bool
    packet_length: int
    bytestream_count: int

    @classmethod
    def read(cls, reader: BinaryIO) -> DataPacketHeader:
        """Read the header bytes that follow the packet type byte."""
        data = _read_exact(reader, 5, "Failed to read data packet header")
        flags, length, bytestream_count = struct.unpack("<BHH", data)
        packet_length = length + 1
        _check_length(packet_length, "Data")
        if bytestream_count == 0:
            raise InvalidError("A byte stream count of 0 is not allowed")
        return cls(bool(flags & 1), packet_length, bytestream_count)

    def write(self, writer: BinaryIO) -> None:
        """Write the full header including the packet type byte."""
        if not 1 <= self.packet_length <= 0x10000:
            raise InvalidError(f"Data packet length {self.packet_length} is out of range")
        if not 0 <= self.bytestream_count <= 0xFFFF:
            raise InvalidError(f"Byte stream count {self.bytestream_count} is out of range")
        data = struct.pack(
            "<BBHH",
            1,
            1 if self.comp_restart_flag else 0,
            self.packet_length - 1,
            self.bytestream_count,
        )
        try:
            writer.write(data)
        except OSError as exc:
            raise WriteError("Failed to write data packet header") from exc


@dataclass
class IgnoredPacketHeader:
    """Header of a packet whose content is skipped."""

    packet_length: int

    @classmethod
    def read(cls, reader: BinaryIO) -> IgnoredPacketHeader:
        """Read the header bytes that follow the packet type byte."""
        data = _read_exact(reader, 3, "Failed to read ignore packet header")
        (length,) = struct.unpack_from("<H", data, 1)
        packet_length = length + 1
        _check_length(packet_length, "Ignored")
        return cls(packet_length)


PacketHeader = Union[IndexPacketHeader, DataPacketHeader, IgnoredPacketHeader]


def read_packet_header(reader: BinaryIO) -> PacketHeader:
    """Read a packet header of any kind, selected by its leading type byte."""
    packet_type = _read_exact(reader, 1, "Failed to read packet type ID")[0]
    if packet_type == 0:
        return IndexPacketHeader.read(reader)
    if packet_type == 1:
        return DataPacketHeader.read(reader)
    if packet_type == 2:
        return IgnoredPacketHeader.read(reader)
    raise InvalidError("Found unknown packet ID when trying to read packet header")