"""
Utilities package for timewdb.

This package provides commonly-used utilities organized by domain:
- parsers: Data file grammar (timestamps, ranges, tags, entry lines)
- fs: Data file discovery
- durations: Duration formatting

Import commonly-used utilities directly from this package:
    from timewdb.utils import find_data_files, pretty_duration

The grammar depends on the interval model, import it from its module:
    from timewdb.utils.parsers import parse_entry
"""

# Filesystem utilities
from .fs import (
    DATA_FILE_PATTERN,
    is_data_file,
    find_data_files,
)

# Duration utilities
from .durations import pretty_duration

__all__ = [
    # Filesystem
    "DATA_FILE_PATTERN",
    "is_data_file",
    "find_data_files",
    # Durations
    "pretty_duration",
]
