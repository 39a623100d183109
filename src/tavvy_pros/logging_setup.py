"""Root logger configuration for the server and CLI."""

import logging
import sys


def setup_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    Level defaults to settings.log_level.
    """
    if level is None:
        from tavvy_pros.config import settings
        level = settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Quiet down noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
