"""Date and time values stored in E57 files."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element

from .errors import InvalidError
from .xmlutil import _local_name


def _find_typed(node: Element, tag_name: str, type_name: str) -> Element | None:
    for child in node:
        if (
            isinstance(child.tag, str)
            and _local_name(child.tag) == tag_name
            and child.get("type") == type_name
        ):
            return child
    return None


@dataclass
class DateTime:
    """A point in time as GPS seconds plus whether an atomic clock was used."""

    gps_time: float
    atomic_reference: bool = False

    @classmethod
    def from_node(cls, node: Element) -> DateTime | None:
        """Parse a date time structure; return None if it is incomplete."""
        value_node = _find_typed(node, "dateTimeValue", "Float")
        if value_node is None:
            raise InvalidError("Unable to find XML tag 'dateTimeValue' with type 'Float'")
        if value_node.text is None:
            return None
        try:
            gps_time = float(value_node.text)
        except ValueError as exc:
            raise InvalidError(
                "Failed to parse inner text of XML tag 'dateTimeValue' as double"
            ) from exc

        atomic_node = _find_typed(node, "isAtomicClockReferenced", "Integer")
        if atomic_node is None:
            return None
        atomic_reference = (atomic_node.text or "0").strip() == "1"
        return cls(gps_time=gps_time, atomic_reference=atomic_reference)

    def xml_string(self, tag_name: str) -> str:
        """Serialize as an XML structure named ``tag_name``."""
        atomic = "1" if self.atomic_reference else "0"
        return (
            f'<{tag_name} type="Structure">\n'
            f'<dateTimeValue type="Float">{float(self.gps_time)!r}</dateTimeValue>\n'
            f'<isAtomicClockReferenced type="Integer">{atomic}</isAtomicClockReferenced>\n'
            f"</{tag_name}>\n"
        )