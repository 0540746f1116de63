"""Command line interface for gendesk."""

from __future__ import annotations

import sys

import click

from gendesk import __app_name__, __version__
from gendesk.app import GenDeskApp, GenDeskOptions
from gendesk.core.errors import GenDeskError
from gendesk.core.logger import get_logger
from gendesk.ui.output import Output

_log = get_logger("cli")

EPILOG = """\b
Notes:
  * Just providing --pkgname is enough to generate a .desktop file.
  * Providing a PKGBUILD filename instead of flags is a possibility.
  * "$SRCDEST/PKGBUILD" or "../PKGBUILD" is used when nothing is given.
  * _exec in the PKGBUILD can be used to specify a different executable
    for the .desktop file. Example: _exec=('appname-gui')
  * Split PKGBUILD packages are supported.
  * If a .png, .svg or .xpm icon is not found as a file or in the
    PKGBUILD, an icon is downloaded from the icon_search_url setting
    in ~/.config/gendesk/settings.json.
  * Categories are guessed based on keywords in the package
    description, unless provided.
"""


@click.command(epilog=EPILOG, context_settings={"help_option_names": ["--help", "-h"]})
@click.version_option(version=__version__, prog_name=__app_name__, message="%(prog)s v.%(version)s")
@click.argument("filename", required=False, type=click.Path(dir_okay=False))
@click.option("-n", "nodownload", is_flag=True, help="Don't download anything.")
@click.option("--nocolor", is_flag=True, help="Don't use colors.")
@click.option("-q", "quiet", is_flag=True, help="Don't output anything on stdout.")
@click.option("-f", "force", is_flag=True, help="Overwrite .desktop files with the same name.")
@click.option("-wm", "--wm", "window_manager", is_flag=True,
              help="Generate a .desktop file for launching a window manager.")
@click.option("--pkgname", default="", help="The name of the package.")
@click.option("--pkgdesc", default="", help="Description of the package.")
@click.option("--name", default="", help="Name of the shortcut.")
@click.option("--genericname", default="", help="Type of application.")
@click.option("--comment", default="", help="Shortcut comment.")
@click.option("--exec", "exec_cmd", default="", help="Path to executable.")
@click.option("--icon", default="", help="Filename or name to use for the icon.")
@click.option("--terminal", type=click.BOOL, is_flag=False, flag_value=True, default=False,
              metavar="[true|false]", help="Run the application in a terminal.")
@click.option("--categories", default="", help="Categories, separated by ';'.")
@click.option("--mimetypes", "--mimetype", "mimetypes", default="", help="Mime types, separated by ';'.")
@click.option("--startupnotify", type=click.BOOL, is_flag=False, flag_value=True, default=False,
              metavar="[true|false]", help="Notification when the application starts.")
@click.option("--custom", default="", help="Custom line to append at the end of the .desktop file.")
@click.option("--path", "workdir", default="", help="Working directory for the application.")
@click.option("--outdir", default=".", type=click.Path(file_okay=False, exists=True),
              help="Directory to write the files to.")
def cli(
    filename: str | None,
    nodownload: bool,
    nocolor: bool,
    quiet: bool,
    force: bool,
    window_manager: bool,
    pkgname: str,
    pkgdesc: str,
    name: str,
    genericname: str,
    comment: str,
    exec_cmd: str,
    icon: str,
    terminal: bool,
    categories: str,
    mimetypes: str,
    startupnotify: bool,
    custom: str,
    workdir: str,
    outdir: str,
) -> None:
    """Generate .desktop files from a PKGBUILD or from flags."""
    output = Output(color=not nocolor, enabled=not quiet)
    options = GenDeskOptions(
        filename=filename,
        pkgname=pkgname,
        pkgdesc=pkgdesc,
        name=name,
        genericname=genericname,
        comment=comment,
        exec=exec_cmd,
        icon=icon,
        categories=categories,
        mimetypes=mimetypes,
        custom=custom,
        path=workdir,
        terminal=terminal,
        startupnotify=startupnotify,
        force=force,
        window_manager=window_manager,
        download=not nodownload,
        outdir=outdir,
    )
    _log.debug("Options: %s", options)

    app = GenDeskApp(options, output)
    try:
        app.run()
    except GenDeskError as e:
        output.err(str(e))
        sys.exit(1)
