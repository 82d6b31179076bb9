#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for discovering timewarrior data files.

A timewarrior data directory holds one file per month named YYYY-MM.data.
Anything else in the directory (undo logs, backlog, tags database) is not
part of the entry format and is ignored.

Functions:
    is_data_file: Check whether a path is a monthly data file
    find_data_files: List monthly data files in a directory

Usage:
    from timewdb.utils.fs import find_data_files

    for path in find_data_files(Path("~/.timewarrior/data").expanduser()):
        print(path.name)  # 2022-06.data, 2022-07.data, ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import List

# --- Local imports ---
from timewdb.core.exceptions import DatabaseError


DATA_FILE_PATTERN = re.compile(r"^(?P<year>[0-9]{4})-(?P<month>[0-9]{2})\.data$")


def is_data_file(path: Path) -> bool:
    """Return True for regular files named YYYY-MM.data."""
    return DATA_FILE_PATTERN.match(path.name) is not None and path.is_file()


def find_data_files(directory: Path) -> List[Path]:
    """
    Find all monthly data files in a directory.

    Files are returned sorted by name, which is chronological.

    Args:
        directory: timewarrior data directory

    Returns:
        List of paths to YYYY-MM.data files

    Raises:
        DatabaseError: If the directory does not exist or cannot be listed
    """
    directory = Path(directory)
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise DatabaseError(f"Cannot read data directory: {directory} ({e})") from e

    return sorted((p for p in children if is_data_file(p)), key=lambda p: p.name)
