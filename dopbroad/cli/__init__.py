"""
Command-line interface for dopbroad.

This module provides CLI tools for:
- Evaluating the broadening contributions at chosen detector angles
"""

__all__ = []
