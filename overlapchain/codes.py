"""Code primitives and input acquisition.

A code is a fixed-length string of decimal digits. Codes chain when the
trailing ``OVERLAP`` characters of one equal the leading ``OVERLAP`` characters
of the next.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Union

from overlapchain.errors import CodeFileError, EmptyInputError
from overlapchain.logging import get_logger

logger = get_logger(__name__)

Code = str

CODE_LENGTH = 6
OVERLAP = 2

_CODE_RE = re.compile(r"[0-9]{%d}" % CODE_LENGTH)


def prefix2(code: Code) -> str:
    """Return the leading overlap characters of ``code``."""
    return code[:OVERLAP]


def suffix2(code: Code) -> str:
    """Return the trailing overlap characters of ``code``."""
    return code[-OVERLAP:]


def first4(code: Code) -> str:
    """Return the part of ``code`` not shared with its successor."""
    return code[: CODE_LENGTH - OVERLAP]


def last2(code: Code) -> str:
    """Return the trailing overlap characters of ``code``.

    Same slice as ``suffix2``; named for its role in reconstruction.
    """
    return code[CODE_LENGTH - OVERLAP :]


def is_valid_code(token: str) -> bool:
    """Return True when ``token`` is exactly ``CODE_LENGTH`` decimal digits."""
    return _CODE_RE.fullmatch(token) is not None


def filter_codes(tokens: Iterable[str]) -> List[Code]:
    """Keep valid codes in input order, dropping everything else.

    Duplicates are kept; the graph collapses them.
    """
    codes: List[Code] = []
    dropped = 0
    for token in tokens:
        if is_valid_code(token):
            codes.append(token)
        else:
            dropped += 1
    if dropped:
        logger.debug(f"Ignored {dropped} malformed token(s)")
    return codes


def read_codes(path: Union[str, Path]) -> List[Code]:
    """Read whitespace-separated codes from a text file.

    Args:
        path: File to read.

    Returns:
        Valid codes in file order.

    Raises:
        CodeFileError: If the file cannot be opened.
        EmptyInputError: If the file holds no valid code.
    """
    try:
        # Undecodable bytes become U+FFFD and end up in tokens that fail validation
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise CodeFileError(f"Cannot read codes file {path}: {exc}") from exc

    codes = filter_codes(text.split())
    if not codes:
        raise EmptyInputError(
            f"The file {path} is empty or contains no valid {CODE_LENGTH}-digit codes"
        )
    logger.info(f"Loaded {len(codes)} codes from {path}")
    return codes
