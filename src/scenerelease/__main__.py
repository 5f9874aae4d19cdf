"""
SceneRelease Package Main Entry Point

This module serves as the entry point when the package is run with
``python -m scenerelease``. It delegates to the Typer application.
"""

from __future__ import annotations

import logging
import sys

from scenerelease.cli.common.error_handler import handle_cli_error
from scenerelease.cli.typer_app import app
from scenerelease.shared.constants import CLIDefaults

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the CLI application."""
    try:
        app()
    except KeyboardInterrupt:
        logger.info("Command interrupted by user")
        sys.exit(CLIDefaults.EXIT_ERROR)
    except SystemExit:
        raise
    except Exception as e:  # noqa: BLE001
        sys.exit(handle_cli_error(e, "scenerelease-main"))


if __name__ == "__main__":
    main()
