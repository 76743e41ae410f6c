"""Tests for catalog/writer.py: rendering and writing locale packages.

Python 3.13+.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest
from hypothesis import given

from msgtable.catalog import (
    LocaleCatalog,
    ModuleCatalogSource,
    ModuleCatalogWriter,
    render_category_module,
    render_index_module,
    validate_category_name,
)
from msgtable.catalog import writer as writer_module
from msgtable.diagnostics import CatalogWriteError, ConfigurationError, DiagnosticCode
from msgtable.tree import Namespace
from tests.strategies import message_trees

_ZH = LocaleCatalog.from_mapping(
    "zh",
    {"auth": {"inputs": {"email": "电子信箱"}, "title": "登入"}, "home": {"title": "首页"}},
)
_JP = LocaleCatalog.from_mapping("jp", {"auth": {"title": "サインイン"}})


class TestRendering:
    """Module source rendering."""

    def test_category_module(self) -> None:
        """Nested dict literal with repr'd keys and values."""
        source = render_category_module(Namespace.from_mapping({"a": {"b": "it's"}, "c": "x"}))

        namespace: dict[str, object] = {}
        exec(source, namespace)  # noqa: S102
        assert namespace["messages"] == {"a": {"b": "it's"}, "c": "x"}
        assert source.startswith("# Generated by msgtable.")

    def test_index_module(self) -> None:
        """Imports every category and re-exports them as messages."""
        source = render_index_module(["auth", "home"])

        assert "from .auth import messages as auth" in source
        assert "from .home import messages as home" in source
        assert "'home': home," in source
        ast.parse(source)

    def test_empty_index_module(self) -> None:
        """A locale without categories exports an empty dict."""
        assert render_index_module([]).endswith("messages = {}\n")

    @given(message_trees())
    def test_rendered_source_evaluates_to_tree(self, tree: Namespace) -> None:
        """Any tree renders to source defining the same mapping."""
        namespace: dict[str, object] = {}
        exec(render_category_module(tree), namespace)  # noqa: S102

        assert namespace["messages"] == tree.to_dict()


class TestValidateCategoryName:
    """Category names become module names."""

    @pytest.mark.parametrize("name", ["auth", "home_page", "_private", "v2"])
    def test_valid(self, name: str) -> None:
        """Identifiers are accepted."""
        validate_category_name(name)

    @pytest.mark.parametrize("name", ["", "2fa", "my-page", "class", "__init__", "a.b"])
    def test_invalid(self, name: str) -> None:
        """Non-identifiers, keywords and dunder names are refused."""
        with pytest.raises(CatalogWriteError) as exc_info:
            validate_category_name(name)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CATEGORY_NAME


class TestModuleCatalogWriter:
    """Writing packages to disk."""

    def test_layout(self, tmp_path: Path) -> None:
        """One directory per locale, one module per category plus __init__.py."""
        out = tmp_path / "out"

        summary = ModuleCatalogWriter(out).write([_ZH, _JP])

        assert sorted(p.name for p in (out / "zh").iterdir()) == [
            "__init__.py",
            "auth.py",
            "home.py",
        ]
        assert sorted(p.name for p in (out / "jp").iterdir()) == ["__init__.py", "auth.py"]
        assert summary.locales == ("zh", "jp")
        assert summary.categories_for("zh") == ("auth", "home")
        assert summary.categories_for("en") == ()
        assert summary.file_count == 5

    def test_written_catalogs_load_back(self, tmp_path: Path) -> None:
        """ModuleCatalogSource reads back exactly what was written."""
        out = tmp_path / "out"

        ModuleCatalogWriter(out, max_workers=2).write([_ZH, _JP])

        source = ModuleCatalogSource(out)
        assert source.load("zh") == _ZH
        assert source.load("jp") == _JP

    def test_empty_catalog_gets_empty_package(self, tmp_path: Path) -> None:
        """A locale without categories still gets a loadable package."""
        out = tmp_path / "out"

        ModuleCatalogWriter(out).write([LocaleCatalog("jp")])

        assert ModuleCatalogSource(out).load("jp") == LocaleCatalog("jp")

    def test_output_root_replaced(self, tmp_path: Path) -> None:
        """Stale content of the output root is removed."""
        out = tmp_path / "out"
        (out / "old").mkdir(parents=True)
        (out / "stale.txt").write_text("x", encoding="utf-8")

        ModuleCatalogWriter(out).write([_JP])

        assert sorted(p.name for p in out.iterdir()) == ["jp"]

    def test_output_root_file_replaced(self, tmp_path: Path) -> None:
        """A plain file in place of the output root is replaced by a directory."""
        out = tmp_path / "out"
        out.write_text("x", encoding="utf-8")

        ModuleCatalogWriter(out).write([_JP])

        assert (out / "jp" / "__init__.py").is_file()

    def test_invalid_category_leaves_output_untouched(self, tmp_path: Path) -> None:
        """Validation happens before anything is deleted."""
        out = tmp_path / "out"
        out.mkdir()
        (out / "keep.txt").write_text("x", encoding="utf-8")
        bad = LocaleCatalog.from_mapping("zh", {"my-page": {"title": "x"}})

        with pytest.raises(CatalogWriteError):
            ModuleCatalogWriter(out).write([bad])

        assert (out / "keep.txt").is_file()

    @pytest.mark.parametrize("target", [".", "..", "/"])
    def test_refuses_unsafe_roots(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, target: str
    ) -> None:
        """The working directory, its parents and the filesystem root are never deleted."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            ModuleCatalogWriter(target).write([_JP])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSAFE_OUTPUT_ROOT
        assert tmp_path.is_dir()

    def test_unsafe_locale(self, tmp_path: Path) -> None:
        """Locale codes must be safe directory names."""
        with pytest.raises(ConfigurationError):
            ModuleCatalogWriter(tmp_path / "out").write([LocaleCatalog("../x")])

    def test_failed_write_keeps_previous_output(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A module that cannot be written leaves the old output and no staging directory."""
        out = tmp_path / "out"
        ModuleCatalogWriter(out).write([_ZH])
        real_write = writer_module._write_module

        def failing_write(staging: Path, relative: Path, source: str) -> Path:
            if relative.name == "home.py":
                raise PermissionError(relative)
            return real_write(staging, relative, source)

        monkeypatch.setattr(writer_module, "_write_module", failing_write)

        with pytest.raises(PermissionError):
            ModuleCatalogWriter(out).write([_JP, _ZH])

        assert sorted(p.name for p in tmp_path.iterdir()) == ["out"]
        assert sorted(p.name for p in out.iterdir()) == ["zh"]
        assert ModuleCatalogSource(out).load("zh") == _ZH

    def test_summary_paths_point_into_output_root(self, tmp_path: Path) -> None:
        out = tmp_path / "out"

        summary = ModuleCatalogWriter(out).write([_JP])

        assert set(summary.files) == {out / "jp" / "auth.py", out / "jp" / "__init__.py"}
        assert all(path.is_file() for path in summary.files)
