"""Tests for resource stores and the resource mapper."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitegen import (
    DirectoryResourceStore,
    InputOutputPair,
    PackageResourceStore,
    PathSecurityError,
    ResourceConfig,
    ResourceNotFoundError,
    copy_resource,
)
from sitegen.paths import is_within_root, normalize_relative


# =============================================================================
# Path normalisation
# =============================================================================


class TestNormalizeRelative:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("css/style.css", "css/style.css"),
            ("./css/style.css", "css/style.css"),
            ("css/../images/logo.png", "images/logo.png"),
            (".", "."),
        ],
    )
    def test_accepts_relative(self, raw, expected):
        assert normalize_relative(raw, field="output_path") == expected

    @pytest.mark.parametrize("raw", ["/etc/passwd", "C:\\Windows", "\\\\server\\share"])
    def test_rejects_absolute(self, raw):
        with pytest.raises(PathSecurityError, match="cannot be an absolute path"):
            normalize_relative(raw, field="output_path")

    @pytest.mark.parametrize(
        "raw",
        ["..", "../secret.txt", "a/../../secret.txt", "./foo/../../../etc/passwd", "..\\secret.txt"],
    )
    def test_rejects_traversal(self, raw):
        with pytest.raises(PathSecurityError, match="cannot traverse outside base directory"):
            normalize_relative(raw, field="input_filename")

    def test_rejects_null_byte(self):
        with pytest.raises(PathSecurityError, match="null byte"):
            normalize_relative("style\x00.css", field="input_filename")

    def test_error_names_field(self):
        with pytest.raises(PathSecurityError, match="output_filename"):
            normalize_relative("../x", field="output_filename")

    def test_path_security_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_relative("/abs", field="output_path")


def test_is_within_root(tmp_path: Path):
    assert is_within_root(tmp_path / "a" / "b.txt", tmp_path)
    assert not is_within_root(tmp_path / ".." / "b.txt", tmp_path)


# =============================================================================
# Resource stores
# =============================================================================


class TestDirectoryResourceStore:
    def test_opens_existing_resource(self, resource_root):
        store = DirectoryResourceStore(resource_root)
        with store.open("test.txt") as fh:
            assert fh.read() == b"hello"

    def test_missing_resource(self, resource_root):
        store = DirectoryResourceStore(resource_root)
        with pytest.raises(ResourceNotFoundError, match="missing.txt"):
            store.open("missing.txt")

    def test_directory_is_not_a_resource(self, resource_root):
        with pytest.raises(ResourceNotFoundError):
            DirectoryResourceStore(resource_root).open("css")

    def test_escape_rejected(self, resource_root, tmp_path):
        (tmp_path / "outside.txt").write_text("nope", encoding="utf-8")
        with pytest.raises(PathSecurityError):
            DirectoryResourceStore(resource_root).open("../outside.txt")

    def test_default_root_is_resources(self):
        assert DirectoryResourceStore().root == Path("resources")


class TestPackageResourceStore:
    def test_opens_package_data(self):
        # Any installed package with a known data file works as a fixture.
        store = PackageResourceStore("sitegen")
        with store.open("__init__.py") as fh:
            assert b"sitegen" in fh.read()

    def test_missing_resource(self):
        with pytest.raises(ResourceNotFoundError, match="no-such-file.css"):
            PackageResourceStore("sitegen").open("no-such-file.css")

    def test_missing_package(self):
        with pytest.raises(ResourceNotFoundError, match="Resource package not found"):
            PackageResourceStore("sitegen_no_such_package").open("x.css")


# =============================================================================
# InputOutputPair / copy_resource
# =============================================================================


class TestInputOutputPair:
    def test_destination_uses_input_name_by_default(self):
        pair = InputOutputPair("css/style.css", "out")
        assert pair.destination() == Path("out/css/style.css")

    def test_destination_uses_output_filename_override(self):
        pair = InputOutputPair("test.txt", "out/static", output_filename="renamed.txt")
        assert pair.destination() == Path("out/static/renamed.txt")

    @pytest.mark.parametrize(
        "pair",
        [
            InputOutputPair("../../../etc/passwd", "out"),
            InputOutputPair("test.txt", "../outside"),
            InputOutputPair("test.txt", "out", output_filename="../../escape.txt"),
            InputOutputPair("/etc/passwd", "out"),
            InputOutputPair("test.txt", "/tmp/abs"),
            InputOutputPair("test.txt", "out", output_filename="/tmp/abs.txt"),
        ],
    )
    def test_unsafe_components_rejected(self, pair):
        with pytest.raises(PathSecurityError):
            pair.destination()


class TestCopyResource:
    def test_copies_bytes_and_creates_directories(self, resource_root, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        store = DirectoryResourceStore(resource_root)

        written = copy_resource(InputOutputPair("images/logo.png", "site/static"), store)

        assert written == Path("site/static/images/logo.png")
        assert (tmp_path / "site/static/images/logo.png").read_bytes() == b"\x89PNG\r\n\x1a\nfake"

    def test_rename(self, resource_root, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        store = DirectoryResourceStore(resource_root)

        copy_resource(InputOutputPair("test.txt", "site", output_filename="hello.txt"), store)

        assert (tmp_path / "site/hello.txt").read_text(encoding="utf-8") == "hello"

    def test_overwrites_existing(self, resource_root, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "site").mkdir()
        (tmp_path / "site/test.txt").write_text("stale", encoding="utf-8")

        copy_resource(InputOutputPair("test.txt", "site"), DirectoryResourceStore(resource_root))

        assert (tmp_path / "site/test.txt").read_text(encoding="utf-8") == "hello"

    def test_missing_resource_creates_nothing(self, resource_root, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ResourceNotFoundError):
            copy_resource(InputOutputPair("missing.txt", "site/deep"), DirectoryResourceStore(resource_root))
        assert not (tmp_path / "site").exists()

    def test_traversal_touches_nothing(self, resource_root, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(PathSecurityError):
            copy_resource(
                InputOutputPair("test.txt", "site", output_filename="../../escape.txt"),
                DirectoryResourceStore(resource_root),
            )
        assert not (tmp_path / "site").exists()
        assert not (tmp_path.parent / "escape.txt").exists()

    def test_default_store_reads_resources_dir(self, resource_root, tmp_path, monkeypatch):
        # resource_root is tmp_path/resources, the default store location.
        monkeypatch.chdir(tmp_path)
        copy_resource(InputOutputPair("css/style.css", "site"))
        assert (tmp_path / "site/css/style.css").read_text(encoding="utf-8") == "body { color: red; }"


def test_resource_config_defaults():
    config = ResourceConfig()
    assert config.static_files == []
    assert config.local_stylesheets == ["css/tailwind.css"]
    assert config.external_stylesheets == []
