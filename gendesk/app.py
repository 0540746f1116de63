"""GenDeskApp: one generation run, from PKGBUILD (or flags) to .desktop and icon files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from gendesk.core.categories import DEFAULT_CATEGORY, guess_category
from gendesk.core.config import Config, flag_or_env, resolve_recipe_source
from gendesk.core.desktop_writer import DesktopEntry, write_desktop_file
from gendesk.core.errors import DesktopFileExistsError, RecipeNotFoundError
from gendesk.core.fields import split_list
from gendesk.core.icon_fetcher import copy_default_icon, has_icon_file, write_icon_file
from gendesk.core.logger import get_logger
from gendesk.core.pkgbuild_parser import ParseResult, PackageRecord, parse_pkgbuild_file, strip_vcs_suffix
from gendesk.ui.output import Output

_log = get_logger("app")

# Packages without a graphical interface get no .desktop file
SKIP_MARKERS = ("-nox", "-cli")


@dataclass
class GenDeskOptions:
    """Command-line options.  Empty strings mean "not given"."""
    filename: str | None = None
    pkgname: str = ""
    pkgdesc: str = ""
    name: str = ""
    genericname: str = ""
    comment: str = ""
    exec: str = ""
    icon: str = ""
    categories: str = ""
    mimetypes: str = ""
    custom: str = ""
    path: str = ""
    terminal: bool = False
    startupnotify: bool = False
    force: bool = False
    window_manager: bool = False
    download: bool = True
    outdir: str = "."


def capitalize(s: str) -> str:
    """Uppercase the first letter, leaving strings shorter than two characters as they are."""
    if len(s) >= 2:
        return s[0].upper() + s[1:]
    return s


class GenDeskApp:
    """Generates one .desktop file (and possibly an icon) per package."""

    def __init__(
        self,
        options: GenDeskOptions,
        output: Output | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.options = options
        self.output = output or Output()
        self.environ = os.environ if environ is None else environ
        self.outdir = Path(options.outdir)
        self.config = Config()

    # ── Input ──
    def load(self) -> ParseResult:
        """Parse the PKGBUILD, or build a single package from the flags."""
        opts = self.options
        source = resolve_recipe_source(
            opts.filename, opts.pkgname, self.environ, self.config.get("default_pkgbuild"),
        )

        if source.path is None:
            result = ParseResult()
            result.add_package(source.pkgname)
        else:
            if not source.path.is_file():
                if source.is_default:
                    raise RecipeNotFoundError(
                        "Provide a package name with --pkgname, or a valid PKGBUILD file. "
                        "Use --help for more info."
                    )
                raise RecipeNotFoundError(
                    f"Could not find {source.path}, provide a --pkgname or a valid PKGBUILD file"
                )
            result = parse_pkgbuild_file(source.path)
            if not result.pkgnames:
                fallback = (
                    opts.pkgname
                    or self.environ.get("pkgname", "")
                    or source.path.resolve().parent.name
                )
                if not fallback:
                    raise RecipeNotFoundError(f"No package name found in {source.path}")
                _log.info("No pkgname in %s, using %s", source.path, fallback)
                result.add_package(fallback)

        # The environment only stands in for flags when there is no PKGBUILD
        env = self.environ if source.path is None else {}
        for record in result.packages.values():
            self._apply_overrides(record, env)
        return result

    def _apply_overrides(self, record: PackageRecord, env: Mapping[str, str]) -> None:
        """Flags (or their environment variables) win over PKGBUILD values."""
        opts = self.options
        text_fields = {
            "description": flag_or_env(opts.pkgdesc, "pkgdesc", env),
            "exec": flag_or_env(opts.exec, "exec", env),
            "display_name": flag_or_env(opts.name, "name", env),
            "generic_name": flag_or_env(opts.genericname, "genericname", env),
            "comment": flag_or_env(opts.comment, "comment", env),
            "custom": flag_or_env(opts.custom, "custom", env),
            "icon": opts.icon,
            "path": opts.path,
        }
        for attr, value in text_fields.items():
            if value:
                setattr(record, attr, value)

        categories = flag_or_env(opts.categories, "categories", env)
        if categories:
            record.categories = split_list(categories)
        mimetypes = flag_or_env(opts.mimetypes, "mimetypes", env)
        if mimetypes:
            record.mime_types = split_list(mimetypes)

    # ── Resolution ──
    def resolve_entry(self, record: PackageRecord) -> DesktopEntry:
        """Fill in every field that the PKGBUILD and the flags left out."""
        pkgname = strip_vcs_suffix(record.pkgname)
        description = record.description or pkgname
        if record.categories is None:
            categories = split_list(guess_category(description))
        else:
            # An explicitly empty _categories is not guessed
            categories = record.categories or [DEFAULT_CATEGORY]
        return DesktopEntry(
            pkgname=pkgname,
            name=record.display_name or capitalize(pkgname),
            exec_cmd=record.exec or pkgname,
            comment=record.comment or description,
            generic_name=record.generic_name or "",
            icon=record.icon or pkgname,
            categories=categories,
            mime_types=record.mime_types or [],
            terminal=self.options.terminal,
            startup_notify=self.options.startupnotify,
            path=record.path or "",
            custom=record.custom or "",
        )

    # ── Run ──
    def run(self) -> list[Path]:
        """Write all .desktop files.  Returns the paths that were written."""
        result = self.load()
        written: list[Path] = []

        for declared in result.pkgnames:
            if any(marker in declared for marker in SKIP_MARKERS):
                _log.info("Skipping %s", declared)
                continue
            record = result.packages[declared]
            entry = self.resolve_entry(record)

            self.output.step(entry.pkgname, "Generating desktop file...")
            try:
                path = write_desktop_file(
                    entry, self.outdir,
                    force=self.options.force,
                    window_manager=self.options.window_manager,
                )
            except DesktopFileExistsError:
                self.output.result("no", "red")
                raise
            self.output.result("ok", "green")
            written.append(path)

            if self._wants_icon(record, result):
                self._provide_icon(entry.pkgname)

        return written

    def _wants_icon(self, record: PackageRecord, result: ParseResult) -> bool:
        if not self.options.download or self.options.window_manager:
            return False
        if record.icon or result.icon_url:
            # Given explicitly or downloaded by the PKGBUILD itself
            return False
        return not has_icon_file(self.outdir)

    def _provide_icon(self, pkgname: str) -> None:
        self.output.step(pkgname, "Downloading icon...")
        if write_icon_file(pkgname, self.outdir, self.config.get("icon_search_url")):
            self.output.result("ok", "bright_cyan")
            return

        self.output.result("no", "yellow")
        self.output.step(pkgname, "Using default icon instead...")
        default_icon = self.config.get("default_icon")
        if copy_default_icon(pkgname, self.outdir, default_icon):
            self.output.result("yes", "bright_magenta")
        else:
            self.output.result("no", "yellow")
            self.output.err(f"could not read {default_icon}!")
