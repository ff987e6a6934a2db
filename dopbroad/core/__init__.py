"""
Core utilities.

This module provides:
- Physical and display constants
- Angle and energy unit conversion
- Configuration and logging
"""

from dopbroad.core import constants
from dopbroad.core import units
from dopbroad.core import config
from dopbroad.core import logging_config

__all__ = [
    "constants",
    "units",
    "config",
    "logging_config",
]
