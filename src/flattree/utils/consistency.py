"""Internal consistency checks of converted records.

The impact parameters of a track are stored twice: as standalone fields
(`dxy`, `zd`) and as entries of the track parameter vector (`trk_par`). Both
are copied from the same candidate, so any disagreement points to a bug in
the upstream producer or in the field mapping of the track converter.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from flattree.errors import TrackConsistencyError

__all__ = [
    "TrackParam",
    "ConsistencyReport",
    "values_agree",
    "check_track_parameters",
    "validate_track",
]

# Absolute difference below which two values always agree
ABS_TOLERANCE = 1e-15

# Maximum relative difference, with respect to the stored field
REL_TOLERANCE = 1e-9


class TrackParam(IntEnum):
    """Enumerates the entries of the track parameter vector."""

    D0 = 0
    Z0 = 1
    PHI = 2
    THETA = 3
    QOVERP = 4


@dataclass
class ConsistencyReport:
    """Outcome of a consistency check.

    Attributes
    ----------
    discrepancies : List[str]
        Description of each failed comparison
    """

    discrepancies: List[str] = field(default_factory=list)

    @property
    def passed(self):
        """Whether all the comparisons succeeded."""
        return len(self.discrepancies) == 0

    def __bool__(self):
        return self.passed


def values_agree(reference, value):
    """Checks that a value agrees with a reference value.

    Parameters
    ----------
    reference : float
        Reference value
    value : float
        Value to compare to the reference

    Returns
    -------
    bool
        `True` if the absolute difference is below 1e-15 or if the difference
        relative to the reference is at most 1e-9
    """
    diff = reference - value
    if abs(diff) < ABS_TOLERANCE:
        return True

    if reference == 0.0:
        return False

    return abs(diff / reference) <= REL_TOLERANCE


def check_track_parameters(track):
    """Checks the impact parameters of a track against its parameter vector.

    Parameters
    ----------
    track : Track
        Converted track record

    Returns
    -------
    ConsistencyReport
        Report listing the comparisons which failed
    """
    report = ConsistencyReport()
    checks = (("zd", TrackParam.Z0), ("dxy", TrackParam.D0))
    for attr, param in checks:
        stored, vector = getattr(track, attr), track.trk_par[param]
        if not values_agree(stored, vector):
            report.discrepancies.append(
                f"{attr} = {stored!r} but trk_par[{param.name}] = {vector!r}"
            )

    return report


def validate_track(track):
    """Raises if a track fails the consistency check.

    Parameters
    ----------
    track : Track
        Converted track record

    Raises
    ------
    TrackConsistencyError
        If the impact parameters disagree with the parameter vector
    """
    report = check_track_parameters(track)
    if not report.passed:
        raise TrackConsistencyError(report.discrepancies)
