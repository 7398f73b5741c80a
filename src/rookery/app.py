"""Desktop application entry point."""

from __future__ import annotations

import logging
import sys

from rookery.config import AppSettings


def main() -> None:
    """Launch the Rookery board window."""
    from rookery.ui.bootstrap import run_application

    try:
        settings = AppSettings.from_env()
    except ValueError as exc:
        sys.exit(f"Invalid environment: {exc}")
    logging.basicConfig(level=settings.log_level)
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
