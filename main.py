"""CLI for renaming a sequence of files with a running, zero-padded index.

Usage:
  python main.py [OPTIONS] PATTERN from-files FILE...
  python main.py [OPTIONS] PATTERN from-glob GLOB [--sort-by ...]

PATTERN has the form ``[<prefix>{padded_idx}]<suffix>``, e.g.
``photo-{padded_idx}.jpg``. Without ``--go`` only a dry run is performed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import click
from config import CONFIG, ORDERS, SORT_POLICIES
from src.rename_seq.order import Order
from src.rename_seq.pattern import CompiledPattern, PatternError, compile_pattern
from src.rename_seq.rename import RenameReaction
from src.rename_seq.selection import (
    SelectionError,
    SortBy,
    files_from_glob,
    files_from_list,
)
from src.rename_seq.sequencer import SequenceAborted, run

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = CONFIG.logging.verbose_level if verbose else CONFIG.logging.level
    logging.basicConfig(
        level=level,
        format=CONFIG.logging.format,
        datefmt=CONFIG.logging.datefmt,
    )
    logging.getLogger().setLevel(level)


def _compile(pattern: str, allow_warnings: bool) -> CompiledPattern:
    try:
        compiled = compile_pattern(pattern)
    except PatternError as exc:
        raise click.ClickException(f"failed to parse rename pattern {pattern!r}: {exc}")

    if not compiled.has_dynamic_content():
        logger.warning(
            "rename pattern %r does not have any dynamic content; "
            "this probably isn't what you want!",
            pattern,
        )
        if not allow_warnings:
            raise click.ClickException(
                "warning(s) emitted, and `--allow-warnings` was not specified; bailing"
            )
    return compiled


def _execute(ctx: click.Context, files: List[Path]) -> None:
    opts = ctx.obj
    dry_run = not opts["go"]
    if dry_run:
        logger.info("doing a dry run of all moves")

    order = Order(opts["order"])
    reaction = RenameReaction(dry_run=dry_run)
    try:
        run(order.traverse(files), opts["pattern"], reaction)
    except SequenceAborted as exc:
        raise click.ClickException(f"failed to execute renaming operation: {exc}")

    if dry_run:
        logger.info("dry run complete; use the `--go` flag to actually rename files")
    else:
        logger.info("renamed %d file(s), %d failure(s)", reaction.renamed, reaction.failed)


@click.group()
@click.option(
    "--go",
    is_flag=True,
    default=CONFIG.behavior.go,
    help="Actually rename files, instead of performing a dry run",
)
@click.option(
    "--allow-warnings",
    is_flag=True,
    default=CONFIG.behavior.allow_warnings,
    help="Execute renaming even if there are warnings of likely unintended behavior",
)
@click.option(
    "--order",
    type=click.Choice(ORDERS, case_sensitive=False),
    default=CONFIG.behavior.order,
    help="The order in which selected files should be renamed",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every move")
@click.argument("pattern")
@click.pass_context
def cli(
    ctx: click.Context,
    go: bool,
    allow_warnings: bool,
    order: str,
    verbose: bool,
    pattern: str,
) -> None:
    """Rename files to PATTERN, e.g. ``photo-{padded_idx}.jpg``."""

    _setup_logging(verbose)
    ctx.obj = {
        "go": go,
        "order": order.lower(),
        "pattern": _compile(pattern, allow_warnings),
    }


@cli.command(name="from-files")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def cmd_from_files(ctx: click.Context, files: Tuple[Path, ...]) -> None:
    """Select files by shell arguments, in the order provided."""

    _execute(ctx, files_from_list(files))


@cli.command(name="from-glob")
@click.argument("glob")
@click.option(
    "--sort-by",
    type=click.Choice(SORT_POLICIES, case_sensitive=False),
    default=CONFIG.selection.sort_by,
    help="The way that paths matching GLOB should be sorted",
)
@click.pass_context
def cmd_from_glob(ctx: click.Context, glob: str, sort_by: str) -> None:
    """Select files matching GLOB under the current directory."""

    try:
        files = files_from_glob(glob, sort_by=SortBy(sort_by.lower()))
    except SelectionError as exc:
        raise click.ClickException(str(exc))
    _execute(ctx, files)


if __name__ == "__main__":
    cli()
