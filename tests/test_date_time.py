import xml.etree.ElementTree as ET

import pytest

from e57kit.date_time import DateTime
from e57kit.errors import InvalidError


@pytest.mark.parametrize(
    "value",
    [DateTime(gps_time=987369380.8049808, atomic_reference=False), DateTime(12.34, True)],
)
def test_round_trip(value):
    node = ET.fromstring(value.xml_string("creation"))
    assert node.tag == "creation"
    assert DateTime.from_node(node) == value


def test_namespaced_input():
    node = ET.fromstring(
        '<creation xmlns="http://example.com/e57" type="Structure">'
        '<dateTimeValue type="Float">1.23</dateTimeValue>'
        '<isAtomicClockReferenced type="Integer"> 1 </isAtomicClockReferenced>'
        "</creation>"
    )
    assert DateTime.from_node(node) == DateTime(1.23, True)


def test_missing_value_tag():
    node = ET.fromstring('<c><dateTimeValue type="Integer">1</dateTimeValue></c>')
    with pytest.raises(InvalidError):
        DateTime.from_node(node)


def test_empty_value_gives_none():
    node = ET.fromstring(
        '<c><dateTimeValue type="Float"/>'
        '<isAtomicClockReferenced type="Integer">1</isAtomicClockReferenced></c>'
    )
    assert DateTime.from_node(node) is None


def test_missing_atomic_flag_gives_none():
    node = ET.fromstring('<c><dateTimeValue type="Float">2.5</dateTimeValue></c>')
    assert DateTime.from_node(node) is None


def test_unparsable_time():
    node = ET.fromstring(
        '<c><dateTimeValue type="Float">soon</dateTimeValue>'
        '<isAtomicClockReferenced type="Integer">0</isAtomicClockReferenced></c>'
    )
    with pytest.raises(InvalidError):
        DateTime.from_node(node)