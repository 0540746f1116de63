"""PKGBUILD parser: extracts per-package .desktop metadata (description, exec, name, categories...)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from gendesk.core.errors import RecipeNotFoundError
from gendesk.core.fields import between, extract_field, split_list, starts_with
from gendesk.core.logger import get_logger

_log = get_logger("pkgbuild_parser")

VCS_SUFFIXES = ("-git", "-svn", "-hg", "-bin")

_ICON_URL_RE = re.compile(r"http://[^\s\"'()]+?\.png")

# Directive prefix -> PackageRecord attribute, matched in order
# (_mimetypes before _mimetype)
_DIRECTIVES: list[tuple[str, str]] = [
    ("pkgdesc", "description"),
    ("_exec", "exec"),
    ("_name", "display_name"),
    ("_genericname", "generic_name"),
    ("_mimetypes", "mime_types"),
    ("_mimetype", "mime_types"),
    ("_comment", "comment"),
    ("_custom", "custom"),
    ("_categories", "categories"),
    ("_path", "path"),
    ("_icon", "icon"),
]

_LIST_ATTRS = {"mime_types", "categories"}


@dataclass
class PackageRecord:
    """Desktop-file relevant fields for one (split) package.

    Fields left as None fall back to values derived from the package name.
    """
    pkgname: str
    description: str | None = None
    exec: str | None = None
    display_name: str | None = None
    generic_name: str | None = None
    comment: str | None = None
    mime_types: list[str] | None = None
    categories: list[str] | None = None
    custom: str | None = None
    icon: str | None = None
    path: str | None = None


@dataclass
class ParseResult:
    pkgnames: list[str] = field(default_factory=list)
    packages: dict[str, PackageRecord] = field(default_factory=dict)
    icon_url: str = ""

    def add_package(self, name: str) -> PackageRecord:
        if name not in self.packages:
            self.pkgnames.append(name)
            self.packages[name] = PackageRecord(pkgname=name)
        return self.packages[name]


def pkg_list(value: str) -> list[str]:
    """Return the package names of a split package, or the single name.

    Accepts the raw pkgname value, for instance `foo`, `(foo bar)` or
    `foo" "bar` (what is left after removing the outer quotes).
    """
    center = between(value, "(", ")") or value
    unquoted = center.replace('"', "").replace("'", "")
    return unquoted.split()


def strip_vcs_suffix(pkgname: str) -> str:
    """Strip a -git, -svn, -hg or -bin suffix from a package name."""
    for suffix in VCS_SUFFIXES:
        if pkgname.endswith(suffix) and len(pkgname) > len(suffix):
            return pkgname[: -len(suffix)]
    return pkgname


def _icon_url(line: str, pkgname: str) -> str:
    match = _ICON_URL_RE.search(line)
    if not match:
        return ""
    url = match.group(0)
    url = url.replace("${pkgname}", pkgname).replace("$pkgname", pkgname)
    if "$" in url:
        # Other variables are not resolved
        return ""
    return url


def parse_pkgbuild(text: str) -> ParseResult:
    """Parse PKGBUILD text into package names and per-package records.

    Attribute lines are assigned to the most recently declared package.
    Lines that come before any package name are ignored.
    """
    result = ParseResult()
    current = ""

    for line in text.splitlines():
        if starts_with(line, "pkgname"):
            value = extract_field(line, "pkgname") or ""
            names = pkg_list(value)
            for name in names:
                result.add_package(name)
            if names:
                current = names[0]
            continue

        if starts_with(line, "package_"):
            # package_foo() { ... } selects foo as the current package
            name = between(line, "_", "(").strip()
            if name:
                result.add_package(name)
                current = name
            continue

        for prefix, attr in _DIRECTIVES:
            value = extract_field(line, prefix)
            if value is None:
                continue
            if not current:
                break
            if attr == "generic_name" and not value:
                break
            record = result.packages[current]
            if attr in _LIST_ATTRS:
                setattr(record, attr, split_list(value))
            else:
                setattr(record, attr, value)
            break
        else:
            if not result.icon_url and "http://" in line and ".png" in line:
                result.icon_url = _icon_url(line, current)

    _log.debug("Parsed packages: %s (icon url: %r)", result.pkgnames, result.icon_url)
    return result


def parse_pkgbuild_file(path: str | Path) -> ParseResult:
    """Read and parse a PKGBUILD file."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        _log.warning("Could not read %s: %s", path, e)
        raise RecipeNotFoundError(f"Could not read {path}") from e
    return parse_pkgbuild(text)
