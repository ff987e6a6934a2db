"""
Logging configuration for dopbroad.

Provides standardized logging setup for the library. Modules obtain their
logger through :func:`get_logger` so that all records live under the
``dopbroad`` namespace.
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def setup_logging(
    level: Union[str, int] = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """
    Configure logging for dopbroad.

    Parameters
    ----------
    level : str or int
        Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        or numeric level
    format_string : str, optional
        Custom format string. If None, uses default format.
    stream : file-like object, optional
        Stream to write logs to. If None, uses sys.stderr.

    Raises
    ------
    ValueError
        If the level name is not known to the logging module
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        stream=stream or sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Parameters
    ----------
    name : str
        Logger name relative to the package (e.g. 'broadening.model')

    Returns
    -------
    logging.Logger
        Logger instance
    """
    return logging.getLogger(f"dopbroad.{name}")
