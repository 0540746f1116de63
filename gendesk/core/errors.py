"""Exceptions raised by gendesk that end the run with a user-facing message."""


class GenDeskError(Exception):
    """Base class for fatal, user-facing errors."""


class RecipeNotFoundError(GenDeskError):
    """No PKGBUILD could be read and no package name was given."""


class DesktopFileExistsError(GenDeskError):
    """The target .desktop file exists and overwriting was not requested."""

    def __init__(self, path) -> None:
        super().__init__(f"{path.name} already exists. Use -f to overwrite.")
        self.path = path
