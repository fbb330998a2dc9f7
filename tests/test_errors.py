import pytest

from e57kit.errors import (
    E57Error,
    InternalError,
    InvalidError,
    NotImplementedE57Error,
    ReadError,
    WriteError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (InvalidError, "Invalid E57 content"),
        (ReadError, "Failed to read E57"),
        (WriteError, "Failed to write E57"),
        (NotImplementedE57Error, "Not implemented"),
        (InternalError, "Internal error"),
    ],
)
def test_message_format(cls, prefix):
    err = cls("something broke")
    assert str(err) == f"{prefix}: something broke"
    assert err.desc == "something broke"


@pytest.mark.parametrize(
    "cls", [InvalidError, ReadError, WriteError, NotImplementedE57Error, InternalError]
)
def test_all_are_catchable_as_base(cls):
    err = cls("desc")
    assert err.desc == "desc"
    assert str(err).endswith(": desc")
    with pytest.raises(E57Error) as info:
        raise err
    assert info.value is err


def test_not_implemented_is_also_builtin_not_implemented():
    err = NotImplementedE57Error("feature")
    assert str(err) == "Not implemented: feature"
    with pytest.raises(NotImplementedError) as info:
        raise err
    assert info.value is err
    assert info.value.desc == "feature"


def test_cause_is_kept():
    original = OSError("disk gone")
    err = ReadError("Failed to read header")
    assert str(err) == "Failed to read E57: Failed to read header"
    with pytest.raises(ReadError) as info:
        try:
            raise original
        except OSError as exc:
            raise err from exc
    assert info.value is err
    assert err.__cause__ is original
    assert err.desc == "Failed to read header"


def test_desc_is_stringified():
    err = InvalidError(42)
    assert err.desc == "42"
    assert str(err) == "Invalid E57 content: 42"