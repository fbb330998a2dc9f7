from e57kit.crc32 import Crc32, crc32c


def test_empty():
    assert Crc32().calculate(b"") == 0


def test_single_u64():
    assert Crc32().calculate(bytes([123] * 8)) == 3786498929


def test_full_page():
    data = bytes(i % 256 for i in range(1024))
    assert Crc32().calculate(data) == 752840335


def test_function_matches_class():
    data = bytes([123] * 8)
    assert crc32c(data) == 3786498929
    assert crc32c(bytearray(data)) == Crc32().calculate(data)


def test_calculator_is_reusable():
    crc = Crc32()
    data = bytes(i % 256 for i in range(1024))
    first = crc.calculate(data)
    other = crc.calculate(bytes([123] * 8))
    second = crc.calculate(data)
    assert first == 752840335
    assert other == 3786498929
    assert second == 752840335