"""Card styles that decide how contributor cards look."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .elements import Element


class Style(ABC):
    """Layout and drawing rules for contributor cards."""

    user_per_row: ClassVar[int]
    card_width: ClassVar[int]

    @abstractmethod
    def draw_contribution_item(self, icon: Element, info: str, value: int, link: str) -> Element:
        """Draw one icon-and-value line of a card."""

    def draw_title(self, title: str, avatar: str) -> Element:
        """Draw the author's name, linked to their profile, above their avatar."""
        name = Element("g").add(
            Element("a")
            .add(Element("text").set("class", "stat bold").add(title))
            .set("xlink:href", f"https://github.com/{title}")
        )
        image = Element("g").add(Element("use").set("xlink:href", avatar)).set(
            "transform", "translate(0, 20)"
        )
        return Element("g").set("transform", "translate(25, 20)").add(name).add(image)

    def _item(self, icon: Element, label: str, link: str) -> Element:
        group = Element("g").add(icon)
        text = Element("text").add(label).set("class", "stat").set("x", 25).set("y", 12.5)
        if link:
            return group.add(Element("a").set("xlink:href", link).add(text))
        return group.add(text)


class CompactStyle(Style):
    """Narrow cards showing bare numbers, five per row."""

    user_per_row = 5
    card_width = 190

    def draw_contribution_item(self, icon: Element, info: str, value: int, link: str) -> Element:
        return self._item(icon, str(value), link)


class FullStyle(Style):
    """Wide cards with labelled numbers, three per row."""

    user_per_row = 3
    card_width = 300

    def draw_contribution_item(self, icon: Element, info: str, value: int, link: str) -> Element:
        return self._item(icon, f"{info}: {value}", link)


def get_style(name: str) -> Style:
    """``compact`` selects the compact style; any other name the full one."""
    if name == "compact":
        return CompactStyle()
    return FullStyle()