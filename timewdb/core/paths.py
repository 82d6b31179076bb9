#!/usr/bin/env python3
"""
paths.py
-------------------
Default locations for the timewarrior database and timewdb logs.

The loader never looks these up by itself: the data directory is always
passed explicitly. Only the CLI and the `raw` convenience use the defaults
below, and both let the caller override them.

    ~/.timewarrior/           # or $TIMEWARRIORDB
    └── data/
        ├── 2022-06.data
        └── 2022-07.data

    ~/.local/state/timewdb/   # or $XDG_STATE_HOME/timewdb
    └── logs/
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import Mapping, Optional


# ----- Environment -----
DB_ENV_VAR = "TIMEWARRIORDB"
STATE_ENV_VAR = "XDG_STATE_HOME"

# ----- Defaults -----
DB_DIRNAME = ".timewarrior"
DATA_DIRNAME = "data"
APP_NAME = "timewdb"


def default_db_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the timewarrior database root ($TIMEWARRIORDB or ~/.timewarrior)."""
    environ = os.environ if environ is None else environ
    override = environ.get(DB_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DB_DIRNAME


def default_data_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the directory holding the monthly YYYY-MM.data files."""
    return default_db_dir(environ) / DATA_DIRNAME


def default_log_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the timewdb log directory."""
    environ = os.environ if environ is None else environ
    base = environ.get(STATE_ENV_VAR)
    state_dir = Path(base).expanduser() if base else Path.home() / ".local" / "state"
    return state_dir / APP_NAME / "logs"


LOG_DIR: Path = default_log_dir()
