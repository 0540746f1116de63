"""Icon handling for generated .desktop files.

Resolution order:
  1. An icon already present in the output directory (.png, .svg, .xpm)
  2. Download from the icon search URL (~/.config/gendesk/settings.json)
  3. Copy of the system default icon (/usr/share/pixmaps/default.png)
"""

from __future__ import annotations

import hashlib
import shutil
from pathlib import Path

import requests

from gendesk.core.config import Config
from gendesk.core.logger import get_logger

_log = get_logger("icon_fetcher")

ICON_EXTENSIONS = [".png", ".svg", ".xpm"]

# MD5 of the image the icon library serves when it has no icon
NO_ICON_MD5 = "12928aa3233965175ea30f5acae593bf"


def has_icon_file(directory: str | Path = ".") -> bool:
    """Check if any icon file of a supported type exists in directory."""
    d = Path(directory)
    for ext in ICON_EXTENSIONS:
        if any(d.glob(f"*{ext}")):
            return True
    return False


def is_icon_data(data: bytes) -> bool:
    """Reject empty bodies, the library's "no icon" image and HTML pages."""
    if not data:
        return False
    if hashlib.md5(data).hexdigest() == NO_ICON_MD5:
        return False
    if data[:3] == b"<ht":
        return False
    return True


def fetch_icon(pkgname: str, search_url: str | None = None, timeout: float | None = None) -> bytes | None:
    """Download the icon for pkgname.  Returns the PNG data or None if not found."""
    config = Config()
    if search_url is None:
        search_url = config.get("icon_search_url")
    if timeout is None:
        timeout = config.get("download_timeout")
    url = search_url % pkgname
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        _log.warning("Icon download failed for %s: %s", pkgname, e)
        return None
    if resp.status_code != 200:
        _log.info("Icon search returned HTTP %d for %s", resp.status_code, pkgname)
        return None
    if not is_icon_data(resp.content):
        _log.info("No icon found for %s", pkgname)
        return None
    return resp.content


def write_icon_file(pkgname: str, directory: str | Path = ".", search_url: str | None = None) -> Path | None:
    """Download and save <pkgname>.png.  Returns the path, or None when no icon was found."""
    data = fetch_icon(pkgname, search_url)
    if data is None:
        return None
    target = Path(directory) / f"{pkgname}.png"
    try:
        target.write_bytes(data)
    except OSError as e:
        _log.warning("Could not write icon to %s: %s", target, e)
        return None
    _log.info("Saved icon to %s", target)
    return target


def copy_default_icon(pkgname: str, directory: str | Path = ".", default_icon: str | Path | None = None) -> bool:
    """Copy the system default icon to <pkgname>.png.  Returns False if that failed."""
    if default_icon is None:
        default_icon = Config().get("default_icon")
    target = Path(directory) / f"{pkgname}.png"
    try:
        shutil.copyfile(default_icon, target)
    except OSError as e:
        _log.warning("Could not copy default icon %s to %s: %s", default_icon, target, e)
        return False
    return True
