#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from timewdb.core.cli_options import data_dir_option, verbose_option

    @cli.command()
    @data_dir_option
    def my_command(data_dir):
        pass
"""
import click
from timewdb.core.paths import LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# DATABASE OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

data_dir_option = click.option(
    "-d", "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="timewarrior data directory (default: $TIMEWARRIORDB/data or ~/.timewarrior/data)"
)
