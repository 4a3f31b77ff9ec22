"""Command-line interface for OverlapChain."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from overlapchain.codes import Code, read_codes
from overlapchain.config import SEARCH_CONFIG, SearchConfig, load_config
from overlapchain.errors import CodeFileError, OverlapChainError
from overlapchain.graph import OverlapGraph
from overlapchain.logging import configure_cli_logging, get_logger
from overlapchain.progress import search_with_progress
from overlapchain.report import format_result, format_summary, write_results

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _ask_yes_no(prompt: str) -> bool:
    """Prompt until the user answers y or n. End of input counts as no."""
    while True:
        try:
            answer = input(prompt).strip().upper()
        except EOFError:
            return False
        if answer in ("Y", "N"):
            return answer == "Y"
        print("Invalid input. Please enter 'y' or 'n'.")


def _acquire_codes(path: Path, max_attempts: int, interactive: bool) -> List[Code]:
    """Read codes from ``path``, offering to retry with another path.

    Retries happen only in interactive sessions and only for files that could
    not be opened; a readable file without valid codes fails immediately.

    Raises:
        CodeFileError: If the file stays unreadable or the user gives up.
        EmptyInputError: If the file holds no valid codes.
    """
    attempts = max_attempts
    while True:
        attempts -= 1
        try:
            return read_codes(path)
        except CodeFileError as exc:
            if not interactive:
                raise
            if attempts <= 0:
                raise CodeFileError(
                    "Maximum number of attempts reached. No file to process."
                ) from exc
            logger.error(str(exc))
            if not _ask_yes_no(
                "Would you like to try entering the file path again? (y/n): "
            ):
                raise CodeFileError("No file to process.") from exc
            try:
                path = Path(input("Please enter the path of the input file: ").strip())
            except EOFError:
                raise CodeFileError("No file to process.") from exc


def _search_codes(
    path: Path,
    config_path: Optional[Path] = None,
    heartbeat: Optional[float] = None,
    results_path: Optional[Path] = None,
    show_all: bool = False,
    assume_yes: bool = False,
) -> None:
    """Load codes, search for the longest chains and print them.

    Args:
        path: Codes file.
        config_path: Optional YAML configuration overriding the defaults.
        heartbeat: Optional heartbeat interval overriding the configuration.
        results_path: Optional JSON export target.
        show_all: List every sequence without asking.
        assume_yes: Answer yes to every prompt.
    """
    try:
        config: SearchConfig = (
            load_config(config_path) if config_path is not None else SEARCH_CONFIG
        )
        config = config.with_overrides(heartbeat_interval=heartbeat)

        interactive = _is_interactive()
        codes = _acquire_codes(path, config.max_attempts, interactive)

        start = perf_counter()
        graph = OverlapGraph.build(codes)
        logger.info(
            f"Graph construction completed. Total elements: "
            f"{len(graph.vertices())}, overlap edges: {graph.edge_count}"
        )

        result = search_with_progress(graph, config)
        elapsed = perf_counter() - start
        logger.info(f"Execution time: {_format_duration(elapsed)}")

        if results_path is not None:
            write_results(result, results_path)
            print(f"Results written to: {results_path}")

        print(format_summary(result))

        count = result.path_count()
        if count > config.display_limit and not (show_all or assume_yes):
            show = interactive and _ask_yes_no(
                f"There are {count} sequences. Would you like to see them? (y/n): "
            )
            if not show:
                logger.info("Exiting without displaying the sequences.")
                return

        listing = format_result(result)
        if listing:
            print(listing)

    except OverlapChainError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``overlapchain`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="overlapchain",
        description="Find the longest chains of overlapping 6-digit codes.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{search}",
        help="Available commands",
    )

    search_parser = subparsers.add_parser(
        "search", help="Search a codes file for the longest chains"
    )
    search_parser.add_argument(
        "codes", type=Path, help="Text file with whitespace-separated codes"
    )
    search_parser.add_argument(
        "--config", "-c", type=Path, default=None, help="YAML configuration file"
    )
    search_parser.add_argument(
        "--heartbeat",
        type=float,
        default=None,
        help="Seconds between progress messages (overrides the configuration)",
    )
    search_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to this JSON file",
    )
    search_parser.add_argument(
        "--all",
        dest="show_all",
        action="store_true",
        help="List every sequence without asking",
    )
    search_parser.add_argument(
        "--yes", "-y", action="store_true", help="Answer yes to all prompts"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    if args.verbose:
        logger.debug("Debug logging enabled")

    if args.command == "search":
        _search_codes(
            path=args.codes,
            config_path=args.config,
            heartbeat=args.heartbeat,
            results_path=args.results,
            show_all=args.show_all,
            assume_yes=args.yes,
        )


if __name__ == "__main__":
    main()
