"""Entry point for gendesk - Desktop File Generator."""

from gendesk.core.logger import setup_logging
from gendesk.ui.cli import cli


def main() -> None:
    setup_logging()
    cli(prog_name="gendesk")


if __name__ == "__main__":
    main()
