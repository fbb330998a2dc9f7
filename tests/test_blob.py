import io
import xml.etree.ElementTree as ET

import pytest

from e57kit.blob import Blob, BlobSectionHeader
from e57kit.errors import InvalidError, ReadError


def test_from_node():
    node = ET.fromstring('<pngImage type="Blob" fileOffset="48" length="1073"/>')
    blob = Blob.from_node(node)
    assert blob == Blob(offset=48, length=1073)


def test_xml_round_trip():
    blob = Blob(offset=1141, length=1073)
    node = ET.fromstring(blob.xml_string("pngImage"))
    assert node.tag == "pngImage"
    assert Blob.from_node(node) == blob


@pytest.mark.parametrize(
    "text",
    [
        '<b type="Integer" fileOffset="1" length="2"/>',
        '<b type="Blob" length="2"/>',
        '<b type="Blob" fileOffset="1"/>',
        '<b type="Blob" fileOffset="x" length="2"/>',
        '<b type="Blob" fileOffset="1" length="-2"/>',
    ],
)
def test_invalid_blob_nodes(text):
    with pytest.raises(InvalidError):
        Blob.from_node(ET.fromstring(text))


def test_from_parent_node():
    parent = ET.fromstring(
        '<rep xmlns="http://example.com/e57">'
        '<imageMask type="Blob" fileOffset="10" length="20"/></rep>'
    )
    assert Blob.from_parent_node("imageMask", parent) == Blob(offset=10, length=20)
    assert Blob.from_parent_node("pngImage", parent) is None


def test_section_header_round_trip():
    header = BlobSectionHeader(section_length=1073)
    data = header.to_bytes()
    assert len(data) == 16
    assert data[0] == 0
    assert BlobSectionHeader.read(io.BytesIO(data)) == header


def test_section_header_wrong_id():
    data = bytearray(BlobSectionHeader(section_length=4).to_bytes())
    data[0] = 1
    with pytest.raises(InvalidError):
        BlobSectionHeader.from_bytes(bytes(data))


def test_section_header_truncated():
    with pytest.raises(ReadError):
        BlobSectionHeader.read(io.BytesIO(bytes(10)))