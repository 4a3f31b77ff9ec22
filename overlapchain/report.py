"""Reconstruction and presentation of search results.

A chain of overlapping codes collapses into one digit string: each code
contributes the part it does not share with its successor, and the last code
also contributes its trailing overlap.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from overlapchain.codes import Code, first4, last2
from overlapchain.logging import get_logger
from overlapchain.search import ResultSet

logger = get_logger(__name__)


def reconstruct(path: Sequence[Code]) -> str:
    """Return the minimal string covered by ``path``.

    ``[v0, ..., vk]`` becomes ``first4(v0) + ... + first4(vk) + last2(vk)``;
    a single code reconstructs to itself and an empty path to ``""``.
    """
    if not path:
        return ""
    return "".join(first4(code) for code in path) + last2(path[-1])


def result_to_dict(result: ResultSet) -> Dict[str, Any]:
    """Return a JSON-serializable view of ``result``."""
    paths = result.all_longest_paths()
    return {
        "max_length": result.max_length(),
        "count": len(paths),
        "paths": [
            {"codes": list(path), "sequence": reconstruct(path)} for path in paths
        ],
    }


def format_result(result: ResultSet) -> str:
    """Format the longest sequences as a numbered listing.

    Returns an empty string when there is nothing to show.
    """
    paths = result.all_longest_paths()
    if not paths:
        return ""

    lines: List[str] = ["Longest sequence(s):"]
    for index, path in enumerate(paths, start=1):
        lines.append(f"{index}. {reconstruct(path)}")
    return "\n".join(lines)


def format_summary(result: ResultSet) -> str:
    """Return the two-line length/count summary."""
    return (
        f"Length of the longest sequence: {result.max_length()}\n"
        f"Number of longest sequences: {result.path_count()}"
    )


def write_results(result: ResultSet, path: Path) -> Path:
    """Write ``result`` as indented JSON to ``path``, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    json_str = json.dumps(result_to_dict(result), indent=2)
    logger.info(f"Writing results to: {path}")
    path.write_text(json_str)
    return path
