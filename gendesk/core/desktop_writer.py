""".desktop file writer: renders application and window-manager entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gendesk.core.errors import DesktopFileExistsError
from gendesk.core.logger import get_logger

_log = get_logger("desktop_writer")


@dataclass
class DesktopEntry:
    """Resolved fields for one .desktop file."""
    pkgname: str
    name: str
    exec_cmd: str
    comment: str = ""
    generic_name: str = ""
    icon: str = ""
    categories: list[str] = field(default_factory=lambda: ["Application"])
    mime_types: list[str] = field(default_factory=list)
    terminal: bool = False
    startup_notify: bool = False
    path: str = ""
    custom: str = ""

    @property
    def filename(self) -> str:
        return f"{self.pkgname}.desktop"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _with_custom(text: str, custom: str) -> str:
    # Custom lines are appended as-is and may span several lines
    if custom:
        text += custom + "\n"
    return text


def render_app_entry(entry: DesktopEntry) -> str:
    """Render a .desktop file for starting an application."""
    categories = entry.categories or ["Application"]
    lines = [
        "[Desktop Entry]",
        "Version=1.2",
        "Type=Application",
        f"Name={entry.name}",
    ]
    if entry.generic_name:
        lines.append(f"GenericName={entry.generic_name}")
    lines += [
        f"Comment={entry.comment}",
        f"Exec={entry.exec_cmd}",
        f"Icon={entry.icon or entry.pkgname}",
        f"Terminal={_bool(entry.terminal)}",
        f"StartupNotify={_bool(entry.startup_notify)}",
        f"Categories={';'.join(categories)};",
    ]
    if entry.mime_types:
        lines.append(f"MimeType={';'.join(entry.mime_types)};")
    if entry.path:
        lines.append(f"Path={entry.path}")
    return _with_custom("\n".join(lines) + "\n", entry.custom)


def render_wm_entry(entry: DesktopEntry) -> str:
    """Render a .desktop file for starting a window manager session."""
    text = (
        f"[Desktop Entry]\n"
        f"Type=XSession\n"
        f"Exec={entry.exec_cmd}\n"
        f"TryExec={entry.exec_cmd}\n"
        f"Name={entry.name}\n"
    )
    return _with_custom(text, entry.custom)


def write_desktop_file(
    entry: DesktopEntry,
    directory: str | Path = ".",
    force: bool = False,
    window_manager: bool = False,
) -> Path:
    """Write <pkgname>.desktop into directory and return its path.

    Raises DesktopFileExistsError, leaving the file untouched, when it
    already exists and force is not set.
    """
    target = Path(directory) / entry.filename
    if target.exists() and not force:
        _log.info("Refusing to overwrite %s", target)
        raise DesktopFileExistsError(target)

    content = render_wm_entry(entry) if window_manager else render_app_entry(entry)
    target.write_text(content, encoding="utf-8")
    _log.info("Wrote %s", target)
    return target
