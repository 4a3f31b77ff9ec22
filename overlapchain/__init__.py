"""OverlapChain: longest chains of overlapping fixed-length codes.

Codes such as ``123456`` and ``567890`` chain because the trailing two digits
of the first equal the leading two digits of the second. OverlapChain builds
the overlap graph of a set of codes and enumerates every longest simple path
through it, reporting all ties.

Primary API:
    OverlapGraph.build() - Build the overlap graph from validated codes
    PathSearchEngine - Exhaustive longest-path search
    ResultSet - Maximum length and all paths achieving it
    ProgressSignal - Background heartbeat for long searches
    reconstruct() - Collapse a chain into its covering digit string

Example:
    from overlapchain import OverlapGraph, find_longest_paths, reconstruct

    graph = OverlapGraph.build(["123456", "567890"])
    result = find_longest_paths(graph)
    [reconstruct(p) for p in result.all_longest_paths()]  # ["1234567890"]
"""

from __future__ import annotations

from overlapchain import cli, logging
from overlapchain._version import __version__
from overlapchain.codes import filter_codes, is_valid_code, read_codes
from overlapchain.config import SEARCH_CONFIG, SearchConfig, load_config
from overlapchain.errors import (
    CodeFileError,
    ConfigError,
    EmptyInputError,
    OverlapChainError,
)
from overlapchain.graph import OverlapGraph
from overlapchain.progress import ProgressSignal, search_with_progress
from overlapchain.report import format_result, reconstruct, result_to_dict
from overlapchain.search import PathSearchEngine, ResultSet, find_longest_paths

__all__ = [
    # Version
    "__version__",
    # Core
    "OverlapGraph",
    "PathSearchEngine",
    "ResultSet",
    "find_longest_paths",
    # Progress
    "ProgressSignal",
    "search_with_progress",
    # Input
    "filter_codes",
    "is_valid_code",
    "read_codes",
    # Output
    "reconstruct",
    "result_to_dict",
    "format_result",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    "load_config",
    # Errors
    "OverlapChainError",
    "CodeFileError",
    "EmptyInputError",
    "ConfigError",
    # Utilities
    "cli",
    "logging",
]
