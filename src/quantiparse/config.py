"""Environment-driven settings shared by the CLI and the HTTP surface."""

from __future__ import annotations

import logging
import os

from .version import __version__


LOG_LEVEL = os.getenv("QUANTIPARSE_LOG_LEVEL", "WARNING").upper()
MAX_INPUT_LENGTH = max(1, int(os.getenv("QUANTIPARSE_MAX_INPUT_LENGTH", "256")))
ENGINE_VERSION = os.getenv("QUANTIPARSE_ENGINE_VERSION", __version__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for command-line and server entry points."""

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
