"""The fixed size binary header at the start of every E57 file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from .errors import InvalidError, ReadError, WriteError

SIGNATURE = b"ASTM-E57"
MAJOR_VERSION = 1
MINOR_VERSION = 0
PAGE_SIZE = 1024

_LAYOUT = struct.Struct("<8sIIQQQQ")


@dataclass
class Header:
    """File header of an E57 file."""

    SIZE: ClassVar[int] = _LAYOUT.size

    signature: bytes = SIGNATURE
    major: int = MAJOR_VERSION
    minor: int = MINOR_VERSION
    phys_length: int = 0
    phys_xml_offset: int = 0
    xml_length: int = 0
    page_size: int = PAGE_SIZE

    @classmethod
    def from_bytes(cls, data: bytes) -> Header:
        """Parse and validate the 48 header bytes."""
        if len(data) != cls.SIZE:
            raise InvalidError(f"E57 file header must be {cls.SIZE} bytes, got {len(data)}")
        header = cls(*_LAYOUT.unpack(bytes(data)))
        if header.signature != SIGNATURE:
            raise InvalidError("Found unsupported signature in header")
        if header.major != MAJOR_VERSION:
            raise InvalidError("Found unsupported major version in header")
        if header.minor != MINOR_VERSION:
            raise InvalidError("Found unsupported minor version in header")
        if header.page_size != PAGE_SIZE:
            raise InvalidError("Found unsupported page size in header")
        return header

    @classmethod
    def read(cls, reader: BinaryIO) -> Header:
        """Read and validate a header from a binary stream."""
        try:
            data = reader.read(cls.SIZE)
        except OSError as exc:
            raise ReadError("Failed to read E57 file header") from exc
        if data is None or len(data) != cls.SIZE:
            raise ReadError("Failed to read E57 file header")
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the header into its 48 byte binary form."""
        return _LAYOUT.pack(
            self.signature,
            self.major,
            self.minor,
            self.phys_length,
            self.phys_xml_offset,
            self.xml_length,
            self.page_size,
        )

    def write(self, writer: BinaryIO) -> None:
        """Write the binary header to a stream."""
        try:
            writer.write(self.to_bytes())
        except OSError as exc:
            raise WriteError("Failed to write E57 file header") from exc