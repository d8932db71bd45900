"""Recipe sync CLI entry points.
This module exposes commands for syncing, re-flattening, and resolving.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import RecipeSyncConfig, parse_log_level
from core.errors import RecipeSyncError
from core.logging_config import configure_logging, get_logger
from core.types import SyncOptions, SyncResult
from discovery.candidates import build_candidates
from ingest.pipeline import RecipeSyncRunner

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="recipesync",
        description="Download and flatten the crafting recipes dump",
    )
    parser.add_argument("--data-dir", help="Override RECIPES_DATA_DIR for this command")
    parser.add_argument("--log-level", help="Override RECIPES_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_sync_command(subparsers)
    _add_flatten_command(subparsers)
    _add_resolve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recipe sync CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.data_dir, args.log_level)
        configure_logging(config.log_level)
        if args.command == "sync":
            return _run_sync_command(config, args)
        if args.command == "flatten":
            return _run_flatten_command(config, args)
        if args.command == "resolve":
            return _run_resolve_command(config, args)
    except RecipeSyncError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_dir: str | None, log_level: str | None) -> RecipeSyncConfig:
    """Build config with optional CLI overrides.

    Args:
        data_dir: Optional data directory override.
        log_level: Optional log level override.

    Returns:
        Runtime configuration.
    """
    config = RecipeSyncConfig.from_env()
    if data_dir:
        config = replace(config, data_dir=Path(data_dir).expanduser())
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_sync_command(config: RecipeSyncConfig, args: argparse.Namespace) -> int:
    """Handle sync command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = SyncOptions(candidates=build_candidates(args.candidate))
    result = RecipeSyncRunner(options, config).run()
    _print_result(result)
    return 0


def _run_flatten_command(config: RecipeSyncConfig, args: argparse.Namespace) -> int:
    """Handle flatten command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = SyncOptions(candidates=(), source_file=Path(args.source_file).expanduser())
    result = RecipeSyncRunner(options, config).run()
    _print_result(result)
    return 0


def _run_resolve_command(config: RecipeSyncConfig, args: argparse.Namespace) -> int:
    """Handle resolve command."""
    options = SyncOptions(candidates=build_candidates(args.candidate))
    location = RecipeSyncRunner(options, config).resolve_location()
    print(
        f"{location.owner}/{location.repository}@{location.branch}\t"
        f"{location.path}\t"
        f"{location.discovery_method}\t"
        f"{location.download_url or location.metadata_url or '-'}"
    )
    return 0


def _print_result(result: SyncResult) -> None:
    print(f"source_url={result.source_url}")
    print(f"raw_records={result.raw_record_count}")
    print(f"flat_rows={result.flat_row_count}")
    print(f"raw_path={result.artifacts.raw_path}")
    print(f"flat_json_path={result.artifacts.flat_json_path}")
    print(f"flat_csv_path={result.artifacts.flat_csv_path}")


def _add_candidate_argument(parser: Any) -> None:
    parser.add_argument(
        "--candidate",
        action="append",
        metavar="OWNER/REPO@BRANCH[:PATH]",
        help="Candidate source, repeatable, tried in the given order",
    )


def _add_sync_command(subparsers: Any) -> None:
    """Register sync subcommand."""
    parser = subparsers.add_parser("sync", help="Resolve, download, and flatten the dump")
    _add_candidate_argument(parser)


def _add_flatten_command(subparsers: Any) -> None:
    """Register flatten subcommand."""
    parser = subparsers.add_parser("flatten", help="Flatten a raw dump already on disk")
    parser.add_argument("source_file", help="Path to a raw recipes.json dump")


def _add_resolve_command(subparsers: Any) -> None:
    """Register resolve subcommand."""
    parser = subparsers.add_parser("resolve", help="Print the resolved source location")
    _add_candidate_argument(parser)
