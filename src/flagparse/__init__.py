"""
flagparse – Argument parsing for command line flags.

Usage
-----
>>> from flagparse import get_flags
>>> flags = get_flags("-a -b -c -d --long-flag-a --long-flag-b --long-flag-c")
>>> "a" in flags
True
"""
from __future__ import annotations

__version__ = '0.1.0'

from flagparse.config import FlagParseConfig, configure_logging
from flagparse.errors import FlagInputError, FlagParseError
from flagparse.parsing.flags import FlagExtractor, FlagKind, get_flags

__all__ = [
    'get_flags',
    'FlagExtractor',
    'FlagKind',
    'FlagParseError',
    'FlagInputError',
    'FlagParseConfig',
    'configure_logging',
]
