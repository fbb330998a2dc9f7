"""Binary blobs stored inside E57 files and their section header."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar
from xml.etree.ElementTree import Element

from .errors import InvalidError, ReadError
from .xmlutil import find_child

_UINT_RE = re.compile(r"\+?\d+")


def _parse_u64(text: str, what: str) -> int:
    if not _UINT_RE.fullmatch(text) or int(text) >= 1 << 64:
        raise InvalidError(f"Unable to parse {what} as u64")
    return int(text)


@dataclass
class Blob:
    """Location of a binary data blob inside an E57 file."""

    offset: int
    length: int

    @classmethod
    def from_node(cls, node: Element) -> Blob:
        """Build a blob descriptor from an XML element of type Blob."""
        if node.get("type") != "Blob":
            raise InvalidError("The supplided tag is not a blob")
        offset = node.get("fileOffset")
        if offset is None:
            raise InvalidError("Failed to find 'fileOffset' attribute in blob tag")
        length = node.get("length")
        if length is None:
            raise InvalidError("Failed to find 'length' attribute in blob tag")
        return cls(offset=_parse_u64(offset, "offset"), length=_parse_u64(length, "length"))

    @classmethod
    def from_parent_node(cls, tag_name: str, parent_node: Element) -> Blob | None:
        """Build a blob from the named child of ``parent_node``, if present."""
        node = find_child(parent_node, tag_name)
        return None if node is None else cls.from_node(node)

    def xml_string(self, tag_name: str) -> str:
        """Serialize the descriptor as an XML element named ``tag_name``."""
        return (
            f'<{tag_name} type="Blob" fileOffset="{self.offset}" '
            f'length="{self.length}"/>\n'
        )


_SECTION_LAYOUT = struct.Struct("<B7xQ")


@dataclass
class BlobSectionHeader:
    """Header in front of the binary data of a blob section."""

    SIZE: ClassVar[int] = _SECTION_LAYOUT.size

    section_length: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BlobSectionHeader:
        """Parse and validate the 16 header bytes."""
        if len(data) != cls.SIZE:
            raise InvalidError(f"Blob section header must be {cls.SIZE} bytes")
        section_id, section_length = _SECTION_LAYOUT.unpack(bytes(data))
        if section_id != 0:
            raise InvalidError("Section ID of the blob section header is not 0")
        return cls(section_length=section_length)

    @classmethod
    def read(cls, reader: BinaryIO) -> BlobSectionHeader:
        """Read and validate a blob section header from a stream."""
        try:
            data = reader.read(cls.SIZE)
        except OSError as exc:
            raise ReadError("Failed to read blob section header") from exc
        if data is None or len(data) != cls.SIZE:
            raise ReadError("Failed to read blob section header")
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the header into its 16 byte binary form."""
        return _SECTION_LAYOUT.pack(0, self.section_length)