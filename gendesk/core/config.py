"""Configuration for gendesk. Reads settings from ~/.config/gendesk/settings.json
and resolves where the PKGBUILD comes from (flag > environment > default path)."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

CONFIG_DIR = Path.home() / ".config" / "gendesk"
SETTINGS_FILE = CONFIG_DIR / "settings.json"
CACHE_DIR = Path.home() / ".cache" / "gendesk"

DEFAULT_ICON_SEARCH_URL = (
    "http://openiconlibrary.sourceforge.net/gallery2/"
    "open_icon_library-full/icons/png/48x48/apps/%s.png"
)

DEFAULTS: dict[str, Any] = {
    "icon_search_url": DEFAULT_ICON_SEARCH_URL,
    "default_icon": "/usr/share/pixmaps/default.png",
    "download_timeout": None,
    "default_pkgbuild": "../PKGBUILD",
    "log_level": "DEBUG",
}

# Environment variables that stand in for missing command-line flags
FIELD_ENV_VARS: dict[str, str] = {
    "pkgdesc": "pkgdesc",
    "exec": "_exec",
    "name": "_name",
    "genericname": "_genericname",
    "mimetypes": "_mimetypes",
    "comment": "_comment",
    "categories": "_categories",
    "custom": "_custom",
}


class Config:
    """Singleton settings manager backed by a JSON file."""

    _instance: "Config | None" = None

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loaded = False
        return cls._instance

    def __init__(self) -> None:
        if self._loaded:
            return
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()
        self._loaded = True

    def _load(self) -> None:
        if SETTINGS_FILE.exists():
            try:
                with open(SETTINGS_FILE, "r") as f:
                    saved = json.load(f)
                if isinstance(saved, dict):
                    self._data.update(saved)
            except (json.JSONDecodeError, OSError):
                pass

    def get(self, key: str, fallback: Any = None) -> Any:
        return self._data.get(key, fallback if fallback is not None else DEFAULTS.get(key))


@dataclass
class RecipeSource:
    """Where the package metadata comes from.

    path is None when everything is taken from flags (and the environment),
    in which case pkgname names the single package to generate.
    """
    path: Path | None = None
    pkgname: str = ""
    is_default: bool = False


def resolve_recipe_source(
    filename: str | None,
    pkgname: str | None,
    environ: Mapping[str, str] | None = None,
    default: str | None = None,
) -> RecipeSource:
    """Pick the PKGBUILD (or the lack of one) from the prioritized sources.

    Order: positional filename, --pkgname, $pkgname, $SRCDEST/PKGBUILD,
    then the default path.
    """
    if environ is None:
        environ = os.environ
    if default is None:
        default = Config().get("default_pkgbuild")

    if filename:
        return RecipeSource(path=Path(filename), pkgname=pkgname or "")
    if pkgname:
        return RecipeSource(pkgname=pkgname)
    if environ.get("pkgname"):
        return RecipeSource(pkgname=environ["pkgname"])
    if environ.get("SRCDEST"):
        return RecipeSource(path=Path(environ["SRCDEST"]) / "PKGBUILD")
    return RecipeSource(path=Path(default), is_default=True)


def flag_or_env(value: str | None, field: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the flag value, or the matching environment variable when the flag is empty."""
    if value:
        return value
    if environ is None:
        environ = os.environ
    var = FIELD_ENV_VARS.get(field)
    if var is None:
        return ""
    return environ.get(var, "")
