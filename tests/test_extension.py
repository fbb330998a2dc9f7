from dataclasses import dataclass

from e57kit.extension import Extension


@dataclass
class _UnknownName:
    extension: Extension
    name: str


@dataclass
class _Record:
    name: object


def test_equality_ignores_url():
    assert Extension("my_extension", "my_url") == Extension("my_extension", "other")
    assert Extension("my_extension", "my_url") != Extension("my_extension2", "my_url")


def test_hash_follows_name():
    first = Extension("my_extension", "my_url")
    second = Extension("my_extension", "my_url2")
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_from_prototype_collects_distinct_extensions():
    extension = Extension("my_extension", "my_url")
    extension2 = Extension("my_extension2", "my_url2")
    prototype = [
        _Record(_UnknownName(extension, "some_name")),
        _Record("cartesianX"),
        _Record(_UnknownName(extension2, "some_other_name")),
        _Record("cartesianY"),
        _Record(_UnknownName(extension, "ai")),
    ]
    result = Extension.from_prototype(prototype)
    assert result == [extension, extension2]
    assert [e.url for e in result] == ["my_url", "my_url2"]


def test_from_prototype_without_extensions_is_empty():
    assert Extension.from_prototype([_Record("cartesianX"), _Record("cartesianZ")]) == []
    assert Extension.from_prototype([]) == []