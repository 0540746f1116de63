"""gendesk - generate .desktop files from a PKGBUILD or command-line flags."""

__app_name__ = "Desktop File Generator"
__version__ = "0.7.0"
