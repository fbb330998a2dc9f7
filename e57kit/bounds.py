"""Optional coordinate and index bounds of a point cloud."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element

from .xmlutil import gen_float, gen_int, opt_f64, opt_int


def _structure(tag_name: str, parts: list[str]) -> str:
    return f'<{tag_name} type="Structure">\n' + "".join(parts) + f"</{tag_name}>\n"


@dataclass
class CartesianBounds:
    """Minimum and maximum values of Cartesian X, Y and Z coordinates."""

    x_min: float | None = None
    x_max: float | None = None
    y_min: float | None = None
    y_max: float | None = None
    z_min: float | None = None
    z_max: float | None = None

    _TAGS = (
        ("x_min", "xMinimum"),
        ("x_max", "xMaximum"),
        ("y_min", "yMinimum"),
        ("y_max", "yMaximum"),
        ("z_min", "zMinimum"),
        ("z_max", "zMaximum"),
    )

    @classmethod
    def from_node(cls, node: Element) -> CartesianBounds:
        """Parse a cartesianBounds structure."""
        return cls(**{attr: opt_f64(node, tag) for attr, tag in cls._TAGS})

    def xml_string(self) -> str:
        """Serialize as a cartesianBounds structure."""
        parts = [
            gen_float(tag, getattr(self, attr))
            for attr, tag in self._TAGS
            if getattr(self, attr) is not None
        ]
        return _structure("cartesianBounds", parts)


@dataclass
class SphericalBounds:
    """Minimum and maximum values of spherical coordinates."""

    range_min: float | None = None
    range_max: float | None = None
    elevation_min: float | None = None
    elevation_max: float | None = None
    azimuth_start: float | None = None
    azimuth_end: float | None = None

    _TAGS = (
        ("azimuth_start", "azimuthStart"),
        ("azimuth_end", "azimuthEnd"),
        ("elevation_min", "elevationMinimum"),
        ("elevation_max", "elevationMaximum"),
        ("range_min", "rangeMinimum"),
        ("range_max", "rangeMaximum"),
    )

    @classmethod
    def from_node(cls, node: Element) -> SphericalBounds:
        """Parse a sphericalBounds structure."""
        return cls(**{attr: opt_f64(node, tag) for attr, tag in cls._TAGS})

    def xml_string(self) -> str:
        """Serialize as a sphericalBounds structure."""
        parts = [
            gen_float(tag, getattr(self, attr))
            for attr, tag in self._TAGS
            if getattr(self, attr) is not None
        ]
        return _structure("sphericalBounds", parts)


@dataclass
class IndexBounds:
    """Minimum and maximum values of the row, column and return indices."""

    row_min: int | None = None
    row_max: int | None = None
    column_min: int | None = None
    column_max: int | None = None
    return_min: int | None = None
    return_max: int | None = None

    _TAGS = (
        ("row_min", "rowMinimum"),
        ("row_max", "rowMaximum"),
        ("column_min", "columnMinimum"),
        ("column_max", "columnMaximum"),
        ("return_min", "returnMinimum"),
        ("return_max", "returnMaximum"),
    )

    @classmethod
    def from_node(cls, node: Element) -> IndexBounds:
        """Parse an indexBounds structure."""
        return cls(**{attr: opt_int(node, tag) for attr, tag in cls._TAGS})

    def xml_string(self) -> str:
        """Serialize as an indexBounds structure."""
        parts = [
            gen_int(tag, getattr(self, attr))
            for attr, tag in self._TAGS
            if getattr(self, attr) is not None
        ]
        return _structure("indexBounds", parts)