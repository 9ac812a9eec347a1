"""Command line utilities for reporting on a local LODA programs checkout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from .config import LocalConfig, validate_rootdir
from .errors import LodaStatsError
from .report import write_creation_dates

# GitPython logs every spawned command at DEBUG.
_QUIET_LOGGERS = ["git.cmd", "git.util", "git.repo"]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _resolve_config(args: argparse.Namespace) -> LocalConfig:
    config = LocalConfig.load(args.config_dir)
    if getattr(args, "rootdir", None) is not None:
        config.loda_program_rootdir = args.rootdir
    if getattr(args, "output", None) is not None:
        config.output_path = args.output
    if getattr(args, "extension", None) is not None:
        config.program_extension = args.extension
    return config


def _creation_dates(args: argparse.Namespace) -> int:
    """Write the program creation date CSV."""
    config = _resolve_config(args)

    _configure_logging(args.verbose)
    try:
        rootdir = config.resolved_rootdir()
        summary = write_creation_dates(
            rootdir,
            config.output_path,
            extension=config.program_extension,
            limit=args.limit,
        )
    except (LodaStatsError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Wrote {config.output_path}")
    print(f"  Programs found : {summary.paths}")
    print(f"  Rows written   : {summary.rows}")
    print(f"  Skipped        : {summary.skipped}")
    return 0


def _config_show(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    print(f"Config file: {config.config_path()}")
    print(f"  loda_program_rootdir : {config.loda_program_rootdir or '(not set)'}")
    print(f"  output_path          : {config.output_path}")
    print(f"  program_extension    : {config.program_extension}")
    return 0


def _config_set_rootdir(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    try:
        config.loda_program_rootdir = validate_rootdir(args.path)
    except LodaStatsError as e:
        print(f"Error: {e}")
        return 1
    config.save()
    print(f"Saved loda_program_rootdir = {config.loda_program_rootdir}")
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory holding config.json (defaults to ~/.lodastats)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    dates_parser = subparsers.add_parser(
        "creation-dates", help="Write the date each program was first committed"
    )
    dates_parser.add_argument(
        "--rootdir", type=Path, help="LODA programs directory (overrides config)"
    )
    dates_parser.add_argument(
        "--output",
        type=Path,
        help="CSV file to write (defaults to data/program_creation_dates.csv)",
    )
    dates_parser.add_argument(
        "--extension", help="Program file extension (defaults to .asm)"
    )
    dates_parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Only process the first N programs, in sorted order",
    )
    dates_parser.add_argument(
        "--verbose", action="store_true", help="Show git command diagnostics"
    )
    dates_parser.set_defaults(func=_creation_dates)

    config_parser = subparsers.add_parser("config", help="Inspect or change settings")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)

    show_parser = config_sub.add_parser("show", help="Print the active configuration")
    show_parser.set_defaults(func=_config_show)

    rootdir_parser = config_sub.add_parser(
        "set-rootdir", help="Remember the LODA programs directory"
    )
    rootdir_parser.add_argument("path", type=Path, help="Path to the programs directory")
    rootdir_parser.set_defaults(func=_config_set_rootdir)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
