"""Shared page renderers and builders for the test suite."""

from __future__ import annotations

from sitegen import HtmlBuilder, PageSettings, StaticPage


def render_home(settings: PageSettings, builder: HtmlBuilder) -> None:
    with builder.h1(classes=settings.h1.classes):
        builder.text("Welcome Home")
    with builder.p():
        builder.text("This is the home page")


def render_about(settings: PageSettings, builder: HtmlBuilder) -> None:
    with builder.p():
        builder.text("About us")


def render_footer(settings: PageSettings, builder: HtmlBuilder) -> None:
    with builder.footer():
        builder.text("© 2026 Test")


def render_crash(settings: PageSettings, builder: HtmlBuilder) -> None:
    raise RuntimeError("content exploded")


def make_page(output_filename: str, title: str | None = None, **kwargs) -> StaticPage:
    """A simple page whose body names its own file."""

    def _content(settings: PageSettings, builder: HtmlBuilder) -> None:
        with builder.p():
            builder.text(f"Content of {output_filename}")

    return StaticPage(
        title=title or output_filename.removesuffix(".html").title(),
        output_filename=output_filename,
        content=kwargs.pop("content", _content),
        **kwargs,
    )
