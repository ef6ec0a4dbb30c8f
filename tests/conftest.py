from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sitegen import Logo, NavSettings, Site, StaticPage
from tests.helpers import render_about, render_footer, render_home


@pytest.fixture
def home_page() -> StaticPage:
    return StaticPage(title="Home", output_filename="index.html", content=render_home)


@pytest.fixture
def about_page() -> StaticPage:
    return StaticPage(
        title="About",
        output_filename="about.html",
        content=render_about,
        footer=render_footer,
        page_title="About | Test Site",
        meta_description="All about the test site",
    )


@pytest.fixture
def nav_settings() -> NavSettings:
    return NavSettings(
        background_color="bg-white",
        nav_selected_color="text-blue-600",
        nav_default_color="text-gray-700",
        logo=Logo(image_url="logo.png", width=50, height=50),
    )


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "site"


@pytest.fixture
def make_site(output_dir, home_page):
    """Build a Site with sensible test defaults; keyword overrides win."""

    def _make(**overrides) -> Site:
        params = {
            "output_path": output_dir,
            "title": "Test Site",
            "pages": [home_page],
        }
        params.update(overrides)
        return Site(**params)

    return _make


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """A resource directory holding a couple of static files."""
    root = tmp_path / "resources"
    (root / "css").mkdir(parents=True)
    (root / "images").mkdir()
    (root / "css" / "style.css").write_text("body { color: red; }", encoding="utf-8")
    (root / "images" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    (root / "test.txt").write_text("hello", encoding="utf-8")
    return root
