from e57kit.bytestream import ByteStreamReadBuffer, ByteStreamWriteBuffer


def test_read_empty():
    bs = ByteStreamReadBuffer()
    assert bs.available() == 0
    result = bs.extract(0)
    assert result.bits == 0
    assert result.offset == 0
    assert result.data == b""
    assert bs.available() == 0
    assert bs.extract(1) is None


def test_read_append_and_extract_bits():
    bs = ByteStreamReadBuffer()
    bs.append(bytes([255]))
    assert bs.available() == 8

    result = bs.extract(2)
    assert result.bits == 2
    assert result.offset == 0
    assert result.data == bytes([255])

    assert bs.available() == 6
    result = bs.extract(6)
    assert result.bits == 6
    assert result.offset == 2
    assert result.data == bytes([255])

    assert bs.available() == 0
    assert bs.extract(1) is None


def test_read_append_and_extract_bytes():
    bs = ByteStreamReadBuffer()
    bs.append(bytes([23, 42, 13]))
    bs.extract(2)
    assert bs.available() == 22
    result = bs.extract(22)
    assert result.bits == 22
    assert result.offset == 2
    assert result.data == bytes([23, 42, 13])


def test_read_remove_consumed_when_appending():
    bs = ByteStreamReadBuffer()
    bs.append(bytes([1, 2, 3, 4, 5]))
    assert bs.extract(4 * 8 + 2) is not None

    bs.append(bytes([6]))
    assert bs.available() == 14

    result = bs.extract(14)
    assert result.bits == 14
    assert result.offset == 2
    assert result.data == bytes([5, 6])


def test_write_empty():
    buffer = ByteStreamWriteBuffer()
    assert buffer.full_bytes() == 0
    assert buffer.all_bytes() == 0
    assert len(buffer.get_full_bytes()) == 0
    assert len(buffer.get_all_bytes()) == 0


def test_write_add_bytes():
    buffer = ByteStreamWriteBuffer()
    buffer.add_bytes(bytes([1, 2, 3, 4]))
    assert buffer.full_bytes() == 4
    assert buffer.all_bytes() == 4

    full = buffer.get_full_bytes()
    assert full == bytes([1, 2, 3, 4])
    assert buffer.full_bytes() == 0
    assert buffer.all_bytes() == 0


def test_write_add_bits_after_full_bytes():
    buffer = ByteStreamWriteBuffer()
    buffer.add_bytes(bytes([1, 2, 3, 4]))
    buffer.add_bits(bytes([0b00001111]), 4)

    assert buffer.full_bytes() == 4
    assert buffer.all_bytes() == 5

    full = buffer.get_full_bytes()
    assert full == bytes([1, 2, 3, 4])
    assert buffer.full_bytes() == 0
    assert buffer.all_bytes() == 1

    all_bytes = buffer.get_all_bytes()
    assert all_bytes == bytes([0b00001111])
    assert buffer.full_bytes() == 0
    assert buffer.all_bytes() == 0


def test_write_two_times_four_bits():
    buffer = ByteStreamWriteBuffer()
    buffer.add_bits(bytes([0b00001111]), 4)
    buffer.add_bits(bytes([0b00001111]), 4)
    assert buffer.full_bytes() == 1
    assert buffer.all_bytes() == 1
    assert buffer.get_all_bytes() == bytes([0b11111111])


def test_write_mixed_bits_and_bytes():
    buffer = ByteStreamWriteBuffer()
    buffer.add_bits(bytes([0b101]), 3)
    buffer.add_bytes(bytes([0b10000001]))
    buffer.add_bits(bytes([0b100001]), 6)

    assert buffer.full_bytes() == 2
    assert buffer.all_bytes() == 3
    assert buffer.get_all_bytes() == bytes([0b00001101, 0b00001100, 0b00000001])


def test_write_then_read_round_trip():
    values = [3, 0, 7, 5, 1, 6, 2]
    writer = ByteStreamWriteBuffer()
    for value in values:
        writer.add_bits(bytes([value]), 3)
    reader = ByteStreamReadBuffer()
    reader.append(writer.get_all_bytes())

    decoded = []
    while reader.available() >= 3:
        chunk = reader.extract(3)
        raw = int.from_bytes(chunk.data, "little")
        decoded.append((raw >> chunk.offset) & 0b111)
    assert decoded[: len(values)] == values