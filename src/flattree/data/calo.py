"""Module with the calorimeter tower record."""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["Tower"]


@dataclass(eq=False)
class Tower(DataBase):
    """Calorimeter tower.

    Attributes
    ----------
    candidate_id : int
        ID of the source candidate, target of weak references
    eta, phi : float
        Pseudorapidity and azimuthal angle
    et : float
        Transverse energy
    e : float
        Energy
    eem, ehad : float
        Electromagnetic and hadronic energy
    edges : np.ndarray
        (4) Tower edges (eta_min, eta_max, phi_min, phi_max)
    t : float
        Tower time
    n_time_hits : int
        Number of hits contributing to the time measurement
    particles : np.ndarray
        IDs of the leaf candidates which deposited energy in the tower
    """

    candidate_id: int = -1
    eta: float = 0.0
    phi: float = 0.0
    et: float = 0.0
    e: float = 0.0
    eem: float = 0.0
    ehad: float = 0.0
    edges: np.ndarray = None
    t: float = 0.0
    n_time_hits: int = 0
    particles: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (("edges", 4),)

    # Variable-length attributes
    _var_length_attrs = (("particles", np.int64),)

    # Attributes specifying candidate IDs
    _index_attrs = ("candidate_id", "particles")
