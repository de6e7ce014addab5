"""Minimal logging utilities for cgrep.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from cgrep.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "cgrep." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'cgrep.mymodule'
    """
    if not (name == "cgrep" or name.startswith("cgrep.")):
        name = f"cgrep.{name}"
    return logging.getLogger(name)


def configure_cli_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the cgrep logger namespace.

    Only the command line entry point calls this; library users keep
    control over their own logging configuration.

    Args:
        verbose: Emit debug records as well as warnings and errors
    """
    root = logging.getLogger("cgrep")
    for stale in [h for h in root.handlers if getattr(h, "_cgrep_cli", False)]:
        root.removeHandler(stale)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("cgrep: %(message)s"))
    handler._cgrep_cli = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
