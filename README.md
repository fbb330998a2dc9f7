# e57kit

Low-level building blocks for the ASTM E57 3D imaging data format (point
clouds and images from laser scanners). The package has no dependencies
beyond the standard library.

## What is in the package

- `e57kit.crc32`: the CRC-32C (Castagnoli) checksum used for E57 pages,
  as the class `Crc32` with `calculate(data)` and the function `crc32c(data)`.
- `e57kit.bytestream`: bit-level buffers for compressed vector byte streams.
  `ByteStreamReadBuffer` (`append`, `extract`, `available`) hands out bits as
  `ByteStreamData` chunks; `ByteStreamWriteBuffer` (`add_bytes`, `add_bits`,
  `get_full_bytes`, `get_all_bytes`, `full_bytes`, `all_bytes`) packs bits
  least significant first.
- `e57kit.bitpack`: `unpack_doubles`, `unpack_singles`, `unpack_ints` and
  `unpack_scaled_ints` take values out of a `ByteStreamReadBuffer`. Integers
  use the smallest bit width that covers `max_value - min_value`; widths
  above 56 bits other than 64 raise `NotImplementedE57Error`. Scaled integers
  are returned raw, without applying a scale.
- `e57kit.header`: `Header`, the 48 byte file header, with `from_bytes`,
  `read`, `to_bytes` and `write`. Reading checks the `ASTM-E57` signature,
  version 1.0 and a page size of 1024.
- `e57kit.cv_section`: `CompressedVectorSectionHeader` with `read` and `write`.
- `e57kit.packet`: `IndexPacketHeader`, `DataPacketHeader` (which can also
  `write`), `IgnoredPacketHeader`, and `read_packet_header`, which reads the
  type byte and dispatches to the matching class.
- `e57kit.xmlutil`: helpers for typed XML elements: `find_child`,
  `opt_f64`/`req_f64`, `opt_int`/`req_int`, `opt_string`/`req_string`, and the
  generators `gen_float`, `gen_int`, `gen_string` (strings go in CDATA).
- `e57kit.blob`: `Blob` descriptors (`from_node`, `from_parent_node`,
  `xml_string`) and `BlobSectionHeader` (`from_bytes`, `read`, `to_bytes`).
- `e57kit.date_time`: `DateTime` (GPS seconds plus an atomic clock flag).
- `e57kit.bounds`: `CartesianBounds`, `SphericalBounds`, `IndexBounds`.
- `e57kit.limits`: `IntensityLimits`, `ColorLimits` and `extract_limit`.
  Limits are plain `int` or `float` values.
- `e57kit.extension`: `Extension`, compared and hashed by name only, with
  `from_prototype` to collect the distinct extensions referenced by records.
- `e57kit.images`: `Image`, `ImageBlob`, `ImageFormat`, the visual reference,
  pinhole, spherical and cylindrical image classes with their properties,
  `projection_from_image_node` and `images_from_document`.
- `e57kit.errors`: the exceptions, all subclasses of `E57Error`:
  `InvalidError`, `ReadError`, `WriteError`, `NotImplementedE57Error` (also a
  `NotImplementedError`) and `InternalError`.

The XML classes parse themselves from `xml.etree.ElementTree.Element` objects
with a `from_node` class method and serialize back with `xml_string`.

## Installation

```
pip install e57kit
```

## Examples

Checksums:

```python
from e57kit.crc32 import crc32c

assert crc32c(bytes([123] * 8)) == 3786498929
```

Reading a file header:

```python
from e57kit.header import Header

with open("scan.e57", "rb") as f:
    header = Header.read(f)
print(header.major, header.minor, header.page_size, header.xml_length)
```

Extracting bit-packed integers:

```python
from e57kit.bytestream import ByteStreamReadBuffer
from e57kit.bitpack import unpack_ints

stream = ByteStreamReadBuffer()
stream.append(bytes([0b11100100]))
values = unpack_ints(stream, 0, 3)   # [0, 1, 2, 3]
```

Parsing image metadata from an XML document:

```python
import xml.etree.ElementTree as ET
from e57kit.images import images_from_document

root = ET.fromstring(xml_text)
for image in images_from_document(root):
    print(image.guid, image.name)
```

## What the package does not do

It is a set of parts, not a complete E57 reader or writer. It does not:

- read or write whole E57 files, nor handle the page layer in which every
  1024 byte page carries its checksum (it provides the checksum only);
- locate the XML section of a file, parse the root or point cloud
  descriptors, or iterate over point data;
- copy blob contents in or out of a file (it only describes blobs and
  their section headers);
- parse the `pose` of an image; `Image.transform` is left unset when
  parsing, and when set it must provide `xml_string(tag_name)`.

## Running the tests

```
pip install -e ".[test]"
pytest
```