"""Converters of the event-level summary quantities.

Missing transverse energy, scalar HT and event weight are produced once per
event: only the first candidate of their collection is converted, and no
record is produced if the collection is empty. Rho is converted once per
pile-up density region.
"""

import numpy as np

from flattree.data import MissingET, Rho, ScalarHT, Weight
from flattree.math import eta, phi, pt

from .base import ConverterBase

__all__ = [
    "MissingETConverter",
    "ScalarHTConverter",
    "RhoConverter",
    "WeightConverter",
]


class MissingETConverter(ConverterBase):
    """Converts the missing transverse energy of the event.

    The candidate momentum is the sum of the visible momenta, the missing
    momentum points in the opposite direction.
    """

    # Name of the output record class (as specified in the configuration)
    name = "MissingET"

    # Output record class
    record = MissingET

    # Whether only the first candidate of the collection is converted
    singleton = True

    def convert(self, candidate, arena):
        """Converts the missing energy candidate."""
        missing = np.negative(candidate.momentum)

        return MissingET(
            met=pt(candidate.momentum), eta=eta(missing), phi=phi(missing)
        )


class ScalarHTConverter(ConverterBase):
    """Converts the scalar sum of the transverse momenta of the event."""

    # Name of the output record class (as specified in the configuration)
    name = "ScalarHT"

    # Output record class
    record = ScalarHT

    # Whether only the first candidate of the collection is converted
    singleton = True

    def convert(self, candidate, arena):
        """Converts the scalar HT candidate."""
        return ScalarHT(ht=pt(candidate.momentum))


class RhoConverter(ConverterBase):
    """Converts the pile-up density of each pseudorapidity region.

    The density is stored as the energy of the candidate, the region as the
    first two of its edges.
    """

    # Name of the output record class (as specified in the configuration)
    name = "Rho"

    # Output record class
    record = Rho

    def convert(self, candidate, arena):
        """Converts one pile-up density candidate."""
        return Rho(rho=float(candidate.momentum[3]), edges=candidate.edges[:2])


class WeightConverter(ConverterBase):
    """Converts the event weight, stored as the energy of the candidate."""

    # Name of the output record class (as specified in the configuration)
    name = "Weight"

    # Output record class
    record = Weight

    # Whether only the first candidate of the collection is converted
    singleton = True

    def convert(self, candidate, arena):
        """Converts the weight candidate."""
        return Weight(weight=float(candidate.momentum[3]))
