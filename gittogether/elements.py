"""A small SVG element tree with XML serialisation."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union

Node = Union["Element", str]


def _escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attribute(value: str) -> str:
    return value.replace('"', "&quot;")


@dataclass
class Element:
    """An SVG element with ordered attributes and child nodes.

    Children are elements or plain strings; strings are written as escaped text.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def set(self, name: str, value: object) -> Element:
        """Set an attribute and return the element for chaining."""
        self.attributes[name] = str(value)
        return self

    def add(self, child: Node) -> Element:
        """Append a child node and return the element for chaining."""
        self.children.append(child)
        return self

    def to_string(self) -> str:
        attrs = "".join(
            f' {key}="{_escape_attribute(value)}"' for key, value in self.attributes.items()
        )
        if not self.children:
            return f"<{self.name}{attrs}/>"
        inner = "\n".join(
            _escape_text(child) if isinstance(child, str) else child.to_string()
            for child in self.children
        )
        return f"<{self.name}{attrs}>\n{inner}\n</{self.name}>"

    def __str__(self) -> str:
        return self.to_string()


def parse_path(source: str) -> dict[str, str]:
    """Return the attributes of the single tag in ``source``."""
    try:
        tag = ET.fromstring(source)
    except ET.ParseError as error:
        raise ValueError(f"cannot parse tag: {error}") from error
    return dict(tag.attrib)