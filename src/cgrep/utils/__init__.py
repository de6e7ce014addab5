"""Utility modules for cgrep.

Provides:
- logger: get_logger for logging, configure_cli_logging for the CLI
- stringbuilder: StringBuilder scratch buffer used for line rewrites
"""

from cgrep.utils.logger import configure_cli_logging, get_logger
from cgrep.utils.stringbuilder import StringBuilder

__all__ = [
    "StringBuilder",
    "configure_cli_logging",
    "get_logger",
]
