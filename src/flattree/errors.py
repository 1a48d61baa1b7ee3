"""Typed exceptions raised by the conversion engine.

Configuration problems are diagnosed and skipped by the branch registry, they
never raise. The exceptions below signal broken assumptions about the input
candidates or about the conversion itself.
"""

from typing import List

__all__ = ["FlatTreeError", "ConstituentDepthError", "TrackConsistencyError"]


class FlatTreeError(Exception):
    """Base exception for all conversion engine errors."""


class ConstituentDepthError(FlatTreeError):
    """Raised when a constituent chain cannot be resolved to leaf candidates."""


class TrackConsistencyError(FlatTreeError):
    """Raised when a converted track disagrees with its track parameters."""

    def __init__(self, discrepancies: List[str]):
        """Initialize with the list of discrepancies.

        Parameters
        ----------
        discrepancies : List[str]
            Human-readable description of each failed comparison
        """
        self.discrepancies = discrepancies
        super().__init__(
            "Track impact parameters do not match the track parameter "
            "vector:\n  - " + "\n  - ".join(discrepancies)
        )
