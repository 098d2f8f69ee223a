"""Logging configuration for the CLI entry point."""

from __future__ import annotations

import logging
import logging.handlers

from storefront.infrastructure.config import Settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure the root logger once; repeated calls only adjust the level."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(_FORMAT)

    if not any(getattr(h, "_storefront", False) for h in root.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        stream._storefront = True  # type: ignore[attr-defined]
        root.addHandler(stream)

        if settings.log_file is not None:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            rotating = logging.handlers.RotatingFileHandler(
                settings.log_file, maxBytes=5_000_000, backupCount=3, encoding="utf-8"
            )
            rotating.setFormatter(formatter)
            rotating._storefront = True  # type: ignore[attr-defined]
            root.addHandler(rotating)

    for handler in root.handlers:
        if getattr(handler, "_storefront", False):
            handler.setLevel(level)
