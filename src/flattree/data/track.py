"""Module with the reconstructed track record."""

from dataclasses import dataclass

import numpy as np

from .base import DataBase

__all__ = ["Track"]


@dataclass(eq=False)
class Track(DataBase):
    """Reconstructed charged particle track.

    Attributes
    ----------
    candidate_id : int
        ID of the source candidate, target of weak references
    pid : int
        Particle ID code of the originating particle
    charge : int
        Electric charge
    eta_outer, phi_outer : float
        Pseudorapidity and azimuthal angle at the outer tracker surface
    x_outer, y_outer, z_outer : float
        Position at the outer tracker surface in mm
    t_outer : float
        Time at the outer tracker surface
    dxy, sdxy : float
        Transverse impact parameter and its uncertainty
    xd, yd, zd : float
        Point of closest approach to the beam line
    trk_par : np.ndarray
        (5) Track parameters (d0, z0, phi, theta, q/p)
    trk_cov : np.ndarray
        (15) Upper triangle of the track parameter covariance matrix
    eta, phi, pt : float
        Pseudorapidity, azimuthal angle and transverse momentum
    x, y, z : float
        Position of the originating particle in mm
    t : float
        Production time of the originating particle
    particle : int
        ID of the originating candidate (weak reference)
    """

    candidate_id: int = -1
    pid: int = 0
    charge: int = 0
    eta_outer: float = 0.0
    phi_outer: float = 0.0
    x_outer: float = 0.0
    y_outer: float = 0.0
    z_outer: float = 0.0
    t_outer: float = 0.0
    dxy: float = 0.0
    sdxy: float = 0.0
    xd: float = 0.0
    yd: float = 0.0
    zd: float = 0.0
    trk_par: np.ndarray = None
    trk_cov: np.ndarray = None
    eta: float = 0.0
    phi: float = 0.0
    pt: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0
    particle: int = -1

    # Fixed-length attributes
    _fixed_length_attrs = (("trk_par", 5), ("trk_cov", 15))

    # Attributes specifying candidate IDs
    _index_attrs = ("candidate_id", "particle")
