"""Module with the forward detector hit record."""

from dataclasses import dataclass

from .base import DataBase

__all__ = ["HectorHit"]


@dataclass(eq=False)
class HectorHit(DataBase):
    """Hit of a forward (roman pot) detector, after beam line transport.

    Attributes
    ----------
    e : float
        Energy of the particle
    tx, ty : float
        Angles of the momentum in the horizontal and vertical planes
    t : float
        Time of the hit, as provided by the transport
    x, y : float
        Hit position in the detector plane
    s : float
        Distance to the interaction point
    particle : int
        ID of the originating candidate (weak reference)
    """

    e: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    t: float = 0.0
    x: float = 0.0
    y: float = 0.0
    s: float = 0.0
    particle: int = -1

    # Attributes specifying candidate IDs
    _index_attrs = ("particle",)
