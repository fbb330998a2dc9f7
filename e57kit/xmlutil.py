"""Helpers for reading and generating the typed XML elements of E57 files."""

from __future__ import annotations

import math
import re
from xml.etree.ElementTree import Element

from .errors import InvalidError

_INT_RE = re.compile(r"[+-]?\d+")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def find_child(node: Element, tag_name: str) -> Element | None:
    """Return the first child element whose local name is ``tag_name``."""
    for child in node:
        if isinstance(child.tag, str) and _local_name(child.tag) == tag_name:
            return child
    return None


def _typed_text(node: Element, tag_name: str, type_name: str) -> str | None:
    child = find_child(node, tag_name)
    if child is None:
        return None
    actual = child.get("type")
    if actual != type_name:
        raise InvalidError(
            f"XML tag '{tag_name}' has type '{actual}' instead of '{type_name}'"
        )
    return child.text or ""


def _missing(tag_name: str) -> InvalidError:
    return InvalidError(f"Required XML tag '{tag_name}' was not found")


def opt_f64(node: Element, tag_name: str) -> float | None:
    """Parse an optional child of type Float; missing text means zero."""
    text = _typed_text(node, tag_name, "Float")
    if text is None:
        return None
    text = text.strip() or "0"
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidError(f"Failed to parse '{text}' of XML tag '{tag_name}' as double") from exc


def req_f64(node: Element, tag_name: str) -> float:
    """Parse a required child of type Float."""
    value = opt_f64(node, tag_name)
    if value is None:
        raise _missing(tag_name)
    return value


def opt_int(node: Element, tag_name: str) -> int | None:
    """Parse an optional child of type Integer; missing text means zero."""
    text = _typed_text(node, tag_name, "Integer")
    if text is None:
        return None
    text = text.strip() or "0"
    if not _INT_RE.fullmatch(text):
        raise InvalidError(f"Failed to parse '{text}' of XML tag '{tag_name}' as integer")
    return int(text)


def req_int(node: Element, tag_name: str) -> int:
    """Parse a required child of type Integer."""
    value = opt_int(node, tag_name)
    if value is None:
        raise _missing(tag_name)
    return value


def opt_string(node: Element, tag_name: str) -> str | None:
    """Return the text of an optional child of type String."""
    return _typed_text(node, tag_name, "String")


def req_string(node: Element, tag_name: str) -> str:
    """Return the text of a required child of type String."""
    value = opt_string(node, tag_name)
    if value is None:
        raise _missing(tag_name)
    return value


def _format_float(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def gen_float(tag_name: str, value: float) -> str:
    """Generate an element of type Float."""
    return f'<{tag_name} type="Float">{_format_float(value)}</{tag_name}>\n'


def gen_int(tag_name: str, value: int) -> str:
    """Generate an element of type Integer."""
    return f'<{tag_name} type="Integer">{int(value)}</{tag_name}>\n'


def gen_string(tag_name: str, value: str) -> str:
    """Generate an element of type String with its text in a CDATA section."""
    escaped = value.replace("]]>", "]]]]><![CDATA[>")
    return f'<{tag_name} type="String"><![CDATA[{escaped}]]></{tag_name}>\n'