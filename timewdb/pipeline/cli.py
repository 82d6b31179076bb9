#!/usr/bin/env python3
"""
cli.py
-------------------
Command-line interface for reading a timewarrior database.

Commands:
    raw     List the entries of an optional range with their display ids
    check   Load the whole database and report malformed lines

Ranges use the data file syntax:
    20220101T120000Z - 20220102T000000Z
    20220101T120000Z
    :today | :yesterday | :week | :lastweek | :month | :lastmonth

Usage:
    python -m timewdb.pipeline.cli raw :week
    python -m timewdb.pipeline.cli raw 20220101T000000Z - 20220201T000000Z
    python -m timewdb.pipeline.cli --verbose check --data-dir ~/.timewarrior/data
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click

from timewdb.core.cli_options import data_dir_option, log_dir_option, verbose_option
from timewdb.core.cli_utils import setup_logger
from timewdb.core.logging_manager import TimewLogger, handle_cli_error
from timewdb.core.paths import default_data_dir
from timewdb.dataclasses.interval import Interval
from timewdb.database.work import load_all
from timewdb.utils.durations import pretty_duration

from .formatter import raw as raw_entries


def _resolve_data_dir(data_dir: Optional[str]) -> Path:
    return Path(data_dir).expanduser() if data_dir else default_data_dir()


@click.group()
@log_dir_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """timewdb - Read a timewarrior database"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")


@cli.command()
@data_dir_option
@click.argument("range_words", nargs=-1, metavar="[RANGE]")
@click.pass_context
def raw(ctx: click.Context, data_dir: Optional[str], range_words: Tuple[str, ...]) -> None:
    """
    List the entries overlapping RANGE (all entries when omitted).

    Entries are listed most recent first with their display id, followed
    by the entry count and the total tracked time. Display ids always
    refer to the whole database, so a filtered listing may skip numbers.
    """
    logger: TimewLogger = ctx.obj["logger"]
    range_text = " ".join(range_words)
    path = _resolve_data_dir(data_dir)

    try:
        interval = Interval.parse(range_text) if range_text else None
        work = raw_entries(interval, path, logger)

        for entry in work.entries:
            marker = "*" if entry.is_open else " "
            click.echo(f"@{entry.display_id:<4}{marker} {entry}")

        click.echo(f"\n{work}")
        click.echo(f"Total: {pretty_duration(work.duration())}")

    except Exception as e:
        handle_cli_error(ctx, e, "raw", {"data_dir": str(path), "range": range_text})


@cli.command()
@data_dir_option
@click.pass_context
def check(ctx: click.Context, data_dir: Optional[str]) -> None:
    """
    Load every data file and stop at the first malformed line.

    Exits with status 1 and names the file, line number and content of
    the offending line when the database cannot be loaded.
    """
    logger: TimewLogger = ctx.obj["logger"]
    path = _resolve_data_dir(data_dir)

    click.echo(f"🔍 Checking {path}...")

    try:
        work = load_all(path, logger)
        click.echo(f"✅ {work}")

    except Exception as e:
        handle_cli_error(ctx, e, "check", {"data_dir": str(path)})


if __name__ == "__main__":
    cli()
