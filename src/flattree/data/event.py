"""Module with the event-level summary records.

MissingET, ScalarHT and Weight are stored once per event. Rho is stored once
per pile-up density region.
"""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["MissingET", "ScalarHT", "Rho", "Weight"]


@dataclass(eq=False)
class MissingET(DataBase):
    """Missing transverse energy.

    Attributes
    ----------
    met : float
        Magnitude of the missing transverse momentum
    eta, phi : float
        Direction of the missing momentum (opposite to the visible momentum)
    """

    met: float = 0.0
    eta: float = 0.0
    phi: float = 0.0


@dataclass(eq=False)
class ScalarHT(DataBase):
    """Scalar sum of the transverse momenta of the visible objects.

    Attributes
    ----------
    ht : float
        Scalar transverse momentum sum
    """

    ht: float = 0.0


@dataclass(eq=False)
class Rho(DataBase):
    """Pile-up energy density in a pseudorapidity region.

    Attributes
    ----------
    rho : float
        Energy density
    edges : np.ndarray
        (2) Pseudorapidity range of the region
    """

    rho: float = 0.0
    edges: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (("edges", 2),)


@dataclass(eq=False)
class Weight(DataBase):
    """Event weight.

    Attributes
    ----------
    weight : float
        Weight of the event
    """

    weight: float = 0.0
