"""Converter of calorimeter towers."""

from flattree.data import Tower
from flattree.math import eta, phi, pt
from flattree.utils.constituents import flatten_constituents

from .base import ConverterBase

__all__ = ["TowerConverter"]


class TowerConverter(ConverterBase):
    """Converts calorimeter towers.

    The `particles` of a tower are the leaf candidates which deposited
    energy in it, resolved through intermediate tracks if needed.
    """

    # Name of the output record class (as specified in the configuration)
    name = "Tower"

    # Output record class
    record = Tower

    def convert(self, candidate, arena):
        """Converts one tower candidate."""
        momentum = candidate.momentum
        particles = [c.id for c in flatten_constituents(candidate, arena)]

        return Tower(
            candidate_id=candidate.id,
            eta=eta(momentum),
            phi=phi(momentum),
            et=pt(momentum),
            e=float(momentum[3]),
            eem=candidate.eem,
            ehad=candidate.ehad,
            edges=candidate.edges.copy(),
            t=self.time(candidate),
            n_time_hits=candidate.n_time_hits,
            particles=particles,
        )
