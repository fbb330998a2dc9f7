"""Header of a compressed vector binary section."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from .errors import InvalidError, ReadError, WriteError

_LAYOUT = struct.Struct("<B7xQQQ")


@dataclass
class CompressedVectorSectionHeader:
    """Section header that precedes the packets of a compressed vector."""

    SIZE: ClassVar[int] = _LAYOUT.size

    section_length: int = 0
    data_offset: int = 0
    index_offset: int = 0
    section_id: int = 1

    @classmethod
    def read(cls, reader: BinaryIO) -> CompressedVectorSectionHeader:
        """Read and validate a section header from a binary stream."""
        try:
            data = reader.read(cls.SIZE)
        except OSError as exc:
            raise ReadError("Failed to read compressed vector section header") from exc
        if data is None or len(data) != cls.SIZE:
            raise ReadError("Failed to read compressed vector section header")
        section_id, section_length, data_offset, index_offset = _LAYOUT.unpack(data)
        if section_id != 1:
            raise InvalidError("Section ID of the compressed vector section header is not 1")
        if section_length % 4 != 0:
            raise InvalidError("Section length is not aligned and a multiple of four")
        return cls(
            section_length=section_length,
            data_offset=data_offset,
            index_offset=index_offset,
            section_id=section_id,
        )

    def write(self, writer: BinaryIO) -> None:
        """Write the section header in its binary form."""
        data = _LAYOUT.pack(
            self.section_id, self.section_length, self.data_offset, self.index_offset
        )
        try:
            writer.write(data)
        except OSError as exc:
            raise WriteError("Failed to write compressed vector section header") from exc