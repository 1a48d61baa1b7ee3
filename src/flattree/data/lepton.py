"""Module with the isolated object records (photons, electrons and muons)."""

from dataclasses import dataclass

import numpy as np

from flattree.utils.docstring import inherit_docstring

from .base import DataBase

__all__ = ["Photon", "Electron", "Muon"]


@dataclass(eq=False)
class IsolatedBase(DataBase):
    """Base class of the isolated objects.

    Attributes
    ----------
    eta, phi, pt : float
        Pseudorapidity, azimuthal angle and transverse momentum
    t : float
        Time of the object
    isolation_var : float
        Isolation variable
    isolation_var_rho_corr : float
        Isolation variable corrected for the pile-up density
    sum_pt_charged : float
        Sum of the pt of the charged particles in the isolation cone
    sum_pt_neutral : float
        Sum of the pt of the neutral particles in the isolation cone
    sum_pt_charged_pu : float
        Sum of the pt of the pile-up charged particles in the isolation cone
    sum_pt : float
        Sum of the pt of all the particles in the isolation cone
    """

    eta: float = 0.0
    phi: float = 0.0
    pt: float = 0.0
    t: float = 0.0
    isolation_var: float = 0.0
    isolation_var_rho_corr: float = 0.0
    sum_pt_charged: float = 0.0
    sum_pt_neutral: float = 0.0
    sum_pt_charged_pu: float = 0.0
    sum_pt: float = 0.0


@dataclass(eq=False)
@inherit_docstring(IsolatedBase)
class Photon(IsolatedBase):
    """Reconstructed photon.

    Attributes
    ----------
    e : float
        Energy
    ehad_over_eem : float
        Ratio of the hadronic to the electromagnetic energy (999.9 if there is
        no electromagnetic energy)
    particles : np.ndarray
        IDs of the leaf candidates the photon was built from
    """

    e: float = 0.0
    ehad_over_eem: float = 0.0
    particles: np.ndarray = None

    # Variable-length attributes
    _var_length_attrs = (("particles", np.int64),)

    # Attributes specifying candidate IDs
    _index_attrs = ("particles",)


@dataclass(eq=False)
@inherit_docstring(IsolatedBase)
class Electron(IsolatedBase):
    """Reconstructed electron.

    Attributes
    ----------
    charge : int
        Electric charge
    ehad_over_eem : float
        Ratio of the hadronic to the electromagnetic energy
    particle : int
        ID of the originating candidate (weak reference)
    """

    charge: int = 0
    ehad_over_eem: float = 0.0
    particle: int = -1

    # Attributes specifying candidate IDs
    _index_attrs = ("particle",)


@dataclass(eq=False)
@inherit_docstring(IsolatedBase)
class Muon(IsolatedBase):
    """Reconstructed muon.

    Attributes
    ----------
    candidate_id : int
        ID of the source candidate, target of weak references
    charge : int
        Electric charge
    particle : int
        ID of the originating candidate (weak reference)
    """

    candidate_id: int = -1
    charge: int = 0
    particle: int = -1

    # Attributes specifying candidate IDs
    _index_attrs = ("candidate_id", "particle")
