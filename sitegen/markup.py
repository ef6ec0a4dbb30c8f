"""Structured HTML builder handed to page content callbacks.

Callbacks never concatenate raw strings: they open nested elements with
``with builder.div(classes="..."):`` and add text with ``builder.text(...)``.
Text and attribute values are escaped with markupsafe; ``raw()`` is the only
way to emit unescaped markup.

Example:
    builder = HtmlBuilder()
    with builder.div(classes="prose"):
        with builder.h1():
            builder.text("Fish & Chips")
        builder.img(src="images/fish.png", alt="A fish")
    str(builder.render())
    # '<div class="prose"><h1>Fish &amp; Chips</h1><img src="images/fish.png" alt="A fish"></div>'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Union

from markupsafe import Markup, escape

AttrValue = Union[str, int, bool, None]

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)


def _attr_name(key: str) -> str:
    # class_ -> class, data_role -> data-role
    return key.rstrip("_").replace("_", "-")


def format_attrs(classes: str | None, attrs: Mapping[str, AttrValue]) -> str:
    parts: list[str] = []
    if classes:
        parts.append(f' class="{escape(classes)}"')
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = _attr_name(key)
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value))}"')
    return "".join(parts)


class HtmlBuilder:
    """Accumulates escaped HTML fragments in document order."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._stack: list[str] = []

    @contextmanager
    def element(
        self,
        tag: str,
        attrs: Mapping[str, AttrValue] | None = None,
        *,
        classes: str | None = None,
        **kwargs: AttrValue,
    ) -> Iterator[HtmlBuilder]:
        if tag in VOID_ELEMENTS:
            raise ValueError(f"<{tag}> cannot have children; use builder.void({tag!r})")
        merged = {**(attrs or {}), **kwargs}
        self._parts.append(f"<{tag}{format_attrs(classes, merged)}>")
        self._stack.append(tag)
        yield self
        self._stack.pop()
        self._parts.append(f"</{tag}>")

    def void(
        self,
        tag: str,
        attrs: Mapping[str, AttrValue] | None = None,
        *,
        classes: str | None = None,
        **kwargs: AttrValue,
    ) -> None:
        merged = {**(attrs or {}), **kwargs}
        self._parts.append(f"<{tag}{format_attrs(classes, merged)}>")

    def text(self, value: object) -> None:
        self._parts.append(str(escape(value)))

    def raw(self, value: str) -> None:
        """Append ``value`` without escaping. The caller vouches for it."""
        self._parts.append(value)

    # Convenience wrappers for the tags content callbacks use most.

    def div(self, **kwargs: AttrValue):
        return self.element("div", **kwargs)

    def span(self, **kwargs: AttrValue):
        return self.element("span", **kwargs)

    def p(self, **kwargs: AttrValue):
        return self.element("p", **kwargs)

    def a(self, href: str | None = None, **kwargs: AttrValue):
        return self.element("a", href=href, **kwargs)

    def nav(self, **kwargs: AttrValue):
        return self.element("nav", **kwargs)

    def i(self, **kwargs: AttrValue):
        return self.element("i", **kwargs)

    def h1(self, **kwargs: AttrValue):
        return self.element("h1", **kwargs)

    def h2(self, **kwargs: AttrValue):
        return self.element("h2", **kwargs)

    def h3(self, **kwargs: AttrValue):
        return self.element("h3", **kwargs)

    def ul(self, **kwargs: AttrValue):
        return self.element("ul", **kwargs)

    def li(self, **kwargs: AttrValue):
        return self.element("li", **kwargs)

    def section(self, **kwargs: AttrValue):
        return self.element("section", **kwargs)

    def footer(self, **kwargs: AttrValue):
        return self.element("footer", **kwargs)

    def img(self, src: str, alt: str = "", **kwargs: AttrValue) -> None:
        self.void("img", src=src, alt=alt, **kwargs)

    def br(self) -> None:
        self.void("br")

    def render(self) -> Markup:
        if self._stack:
            raise ValueError(f"Unclosed elements: {', '.join(self._stack)}")
        return Markup("".join(self._parts))

    def __html__(self) -> str:
        return str(self.render())


__all__ = ["HtmlBuilder", "VOID_ELEMENTS", "format_attrs"]
