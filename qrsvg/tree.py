# -*- coding: utf-8 -*-
"""
QR SVG Element Tree Module

A small typed element tree for the SVG document and its serialization to
text through ``xml.etree.ElementTree``.

Classes:
    Percent: Percentage attribute value
    Text: Character data node
    Element: Tag with ordered attributes and children

Functions:
    serialize: Convert an Element tree to text
"""

import xml.etree.ElementTree as ET
from typing import Dict, NamedTuple, Tuple, Union

from .settings import Format

INDENT = "  "


class Percent(NamedTuple):
    """Attribute value rendered as ``<value>%``."""
    value: int

    def __str__(self) -> str:
        return f"{self.value}%"


AttributeValue = Union[str, int, float, Percent]


class Text(NamedTuple):
    value: str


class Element(NamedTuple):
    """
    One element of the document tree.

    Attributes keep insertion order, which is the order they are written in.
    An element without children is serialized as an empty element.
    """
    tag: str
    attributes: Dict[str, AttributeValue]
    children: Tuple[Union["Element", Text], ...] = ()


def _format_value(value: AttributeValue) -> str:
    if isinstance(value, (str, int, float, Percent)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"unsupported attribute value {value!r}")


def _to_etree(element: Element) -> ET.Element:
    node = ET.Element(element.tag, {k: _format_value(v) for k, v in element.attributes.items()})
    last = None
    for child in element.children:
        if isinstance(child, Text):
            if last is None:
                node.text = (node.text or "") + child.value
            else:
                last.tail = (last.tail or "") + child.value
        else:
            last = _to_etree(child)
            node.append(last)
    return node


def serialize(element: Element, fmt: Format = Format.NONE) -> str:
    """
    Serialize an element tree to text.

    Args:
        element (Element): Root element
        fmt (Format): ``Format.INDENT`` puts each element on its own line,
            indented two spaces per level

    Returns:
        str: The XML text, without an XML declaration
    """
    root = _to_etree(element)
    if fmt is Format.INDENT:
        ET.indent(root, space=INDENT)
    return ET.tostring(root, encoding="unicode")
