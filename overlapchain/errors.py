"""Exception hierarchy for the input-acquisition and configuration layers.

The overlap graph and path search never raise these; they are reserved for
problems detected before the core is invoked.
"""

from __future__ import annotations


class OverlapChainError(Exception):
    """Base class for all OverlapChain errors."""


class CodeFileError(OverlapChainError):
    """The codes file could not be opened or read."""


class EmptyInputError(OverlapChainError):
    """The input contained no valid codes."""


class ConfigError(OverlapChainError):
    """A configuration file is malformed or holds an invalid value."""
