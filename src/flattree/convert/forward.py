"""Converter of forward detector hits."""

from flattree.data import HectorHit

from .base import ConverterBase

__all__ = ["HectorHitConverter"]


class HectorHitConverter(ConverterBase):
    """Converts hits of the forward (roman pot) detectors.

    The beam line transport stores the hit in the detector plane in the
    position four-vector (the `z` component is the distance `s` to the
    interaction point) and the horizontal and vertical angles in the `px`
    and `py` components of the momentum. The time of the hit is provided
    directly by the transport and is stored without conversion.
    """

    # Name of the output record class (as specified in the configuration)
    name = "HectorHit"

    # Output record class
    record = HectorHit

    def convert(self, candidate, arena):
        """Converts one forward hit candidate."""
        momentum, position = candidate.momentum, candidate.position

        return HectorHit(
            e=float(momentum[3]),
            tx=float(momentum[0]),
            ty=float(momentum[1]),
            t=float(position[3]),
            x=float(position[0]),
            y=float(position[1]),
            s=float(position[2]),
            particle=self.reference(arena.first_constituent(candidate)),
        )
