"""Optional intensity and color limits of a point cloud.

Limit values are plain Python numbers: ``int`` for Integer and
ScaledInteger limits, ``float`` for Float limits (single precision
values are rounded to 32-bit precision).
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import Union
from xml.etree.ElementTree import Element

from .errors import InvalidError, NotImplementedE57Error
from .xmlutil import _format_float, _local_name

LimitValue = Union[int, float]

_INT_RE = re.compile(r"[+-]?\d+")


def _find_descendant(node: Element, tag_name: str) -> Element | None:
    for element in node.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == tag_name:
            return element
    return None


def _parse_i64(text: str, desc: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise InvalidError(desc)
    value = int(text)
    if not -(1 << 63) <= value < (1 << 63):
        raise InvalidError(desc)
    return value


def _parse_f64(text: str, desc: str) -> float:
    if not text or "_" in text or text != text.strip():
        raise InvalidError(desc)
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidError(desc) from exc


def _to_single(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def extract_limit(node: Element, tag_name: str) -> LimitValue | None:
    """Parse the first descendant named ``tag_name`` as a limit value."""
    tag = _find_descendant(node, tag_name)
    if tag is None:
        return None
    type_str = tag.get("type")
    if type_str is None:
        raise InvalidError(f"Cannot find type attribute of limit '{tag_name}'")
    text = tag.text if tag.text is not None else "0"
    if type_str == "Integer":
        return _parse_i64(text, "Cannot parse integer limit value")
    if type_str == "ScaledInteger":
        return _parse_i64(text, "Cannot parse scaled integer limit value")
    if type_str == "Float":
        if tag.get("precision", "double") == "single":
            return _to_single(_parse_f64(text, "Cannot parse single limit value"))
        return _parse_f64(text, "Cannot parse double limit value")
    raise NotImplementedE57Error(
        f"Found unsupported limit of type '{type_str}' for '{tag_name}'"
    )


def _display(value: LimitValue) -> str:
    if isinstance(value, int):
        return str(value)
    return _format_float(value)


def _limit_xml(tag_name: str, value: LimitValue | None) -> str:
    if value is None:
        return ""
    return f'<{tag_name} type="Integer">{_display(value)}</{tag_name}>'


@dataclass
class IntensityLimits:
    """Minimum and maximum intensity values."""

    intensity_min: LimitValue | None = None
    intensity_max: LimitValue | None = None

    @classmethod
    def from_node(cls, node: Element) -> IntensityLimits:
        """Parse an intensityLimits structure."""
        return cls(
            intensity_min=extract_limit(node, "intensityMinimum"),
            intensity_max=extract_limit(node, "intenstiyMaximum"),
        )

    def xml_string(self) -> str:
        """Serialize as an intensityLimits structure."""
        return (
            '<intensityLimits type="Structure">'
            + _limit_xml("intensityMinimum", self.intensity_min)
            + _limit_xml("intenstiyMaximum", self.intensity_max)
            + "</intensityLimits>"
        )


@dataclass
class ColorLimits:
    """Minimum and maximum values of the red, green and blue channels."""

    red_min: LimitValue | None = None
    red_max: LimitValue | None = None
    green_min: LimitValue | None = None
    green_max: LimitValue | None = None
    blue_min: LimitValue | None = None
    blue_max: LimitValue | None = None

    _TAGS = (
        ("red_min", "colorRedMinimum"),
        ("red_max", "colorRedMaximum"),
        ("green_min", "colorGreenMinimum"),
        ("green_max", "colorGreenMaximum"),
        ("blue_min", "colorBlueMinimum"),
        ("blue_max", "colorBlueMaximum"),
    )

    @classmethod
    def from_node(cls, node: Element) -> ColorLimits:
        """Parse a colorLimits structure."""
        return cls(**{attr: extract_limit(node, tag) for attr, tag in cls._TAGS})

    def xml_string(self) -> str:
        """Serialize as a colorLimits structure."""
        inner = "".join(_limit_xml(tag, getattr(self, attr)) for attr, tag in self._TAGS)
        return f'<colorLimits type="Structure">{inner}</colorLimits>'