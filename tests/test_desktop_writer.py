"""
Tests for .desktop rendering and writing.
"""

from pathlib import Path

import pytest

from gendesk.core.desktop_writer import (
    DesktopEntry,
    render_app_entry,
    render_wm_entry,
    write_desktop_file,
)
from gendesk.core.errors import DesktopFileExistsError


def _minimal() -> DesktopEntry:
    return DesktopEntry(pkgname="foo", name="Foo", exec_cmd="foo", comment="foo")


class TestRenderApp:
    def test_minimal(self):
        text = render_app_entry(_minimal())
        assert text == (
            "[Desktop Entry]\n"
            "Version=1.2\n"
            "Type=Application\n"
            "Name=Foo\n"
            "Comment=foo\n"
            "Exec=foo\n"
            "Icon=foo\n"
            "Terminal=false\n"
            "StartupNotify=false\n"
            "Categories=Application;\n"
        )
        assert "GenericName" not in text
        assert "MimeType" not in text
        assert "Path=" not in text

    def test_full(self):
        entry = DesktopEntry(
            pkgname="foo",
            name="Foo",
            exec_cmd="foo --gui",
            comment="Does foo",
            generic_name="Foo Tool",
            icon="foo-icon",
            categories=["Application", "Game", "ArcadeGame"],
            mime_types=["text/plain", "text/html"],
            terminal=True,
            startup_notify=True,
            path="/opt/foo",
            custom="Keywords=foo;\nX-Extra=1",
        )
        lines = render_app_entry(entry).splitlines()
        assert "GenericName=Foo Tool" in lines
        assert lines.index("GenericName=Foo Tool") == lines.index("Name=Foo") + 1
        assert "Icon=foo-icon" in lines
        assert "Terminal=true" in lines
        assert "StartupNotify=true" in lines
        assert "Categories=Application;Game;ArcadeGame;" in lines
        assert "MimeType=text/plain;text/html;" in lines
        assert "Path=/opt/foo" in lines
        assert lines[-2:] == ["Keywords=foo;", "X-Extra=1"]

    def test_empty_categories_fall_back(self):
        entry = _minimal()
        entry.categories = []
        assert "Categories=Application;\n" in render_app_entry(entry)


class TestRenderWM:
    def test_wm(self):
        entry = DesktopEntry(pkgname="mywm", name="MyWM", exec_cmd="mywm-session", custom="DesktopNames=MyWM")
        assert render_wm_entry(entry) == (
            "[Desktop Entry]\n"
            "Type=XSession\n"
            "Exec=mywm-session\n"
            "TryExec=mywm-session\n"
            "Name=MyWM\n"
            "DesktopNames=MyWM\n"
        )


class TestWrite:
    def test_writes_file(self, tmp_path: Path):
        path = write_desktop_file(_minimal(), tmp_path)
        assert path == tmp_path / "foo.desktop"
        assert path.read_text(encoding="utf-8").startswith("[Desktop Entry]\n")

    def test_window_manager_mode(self, tmp_path: Path):
        path = write_desktop_file(_minimal(), tmp_path, window_manager=True)
        assert "Type=XSession" in path.read_text()

    def test_existing_file_not_modified(self, tmp_path: Path):
        target = tmp_path / "foo.desktop"
        target.write_text("original")
        with pytest.raises(DesktopFileExistsError) as exc:
            write_desktop_file(_minimal(), tmp_path)
        assert target.read_text() == "original"
        assert "foo.desktop already exists" in str(exc.value)

    def test_force_overwrites(self, tmp_path: Path):
        target = tmp_path / "foo.desktop"
        target.write_text("original")
        write_desktop_file(_minimal(), tmp_path, force=True)
        assert target.read_text().startswith("[Desktop Entry]")

    def test_utf8(self, tmp_path: Path):
        entry = _minimal()
        entry.comment = "Jeu de réflexion"
        path = write_desktop_file(entry, tmp_path)
        assert "Comment=Jeu de réflexion" in path.read_text(encoding="utf-8")
