"""Module with the generator-level particle and vertex records."""

from dataclasses import dataclass

from .base import DataBase

__all__ = ["Particle", "Vertex"]


@dataclass(eq=False)
class Particle(DataBase):
    """Generator-level particle.

    Attributes
    ----------
    candidate_id : int
        ID of the source candidate, target of weak references
    pid : int
        Particle ID code
    status : int
        Generator status code
    is_pu : int
        1 for particles from pile-up interactions
    m1, m2 : int
        Indexes of the first and second mother
    d1, d2 : int
        Indexes of the first and last daughter
    charge : int
        Electric charge
    mass : float
        Generator mass
    e : float
        Energy
    px, py, pz : float
        Momentum components
    eta : float
        Pseudorapidity
    phi : float
        Azimuthal angle
    pt : float
        Transverse momentum
    rapidity : float
        Rapidity
    x, y, z : float
        Production vertex position in mm
    t : float
        Production time
    """

    candidate_id: int = -1
    pid: int = 0
    status: int = 0
    is_pu: int = 0
    m1: int = -1
    m2: int = -1
    d1: int = -1
    d2: int = -1
    charge: int = 0
    mass: float = 0.0
    e: float = 0.0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    pt: float = 0.0
    rapidity: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0

    # Attributes specifying candidate IDs
    _index_attrs = ("candidate_id",)


@dataclass(eq=False)
class Vertex(DataBase):
    """Interaction vertex.

    Attributes
    ----------
    x, y, z : float
        Vertex position in mm
    t : float
        Vertex time
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0
