"""Module with the generic physics object produced by upstream modules."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from flattree.math import pt

from .flavor import TrackSummary, VertexSummary

__all__ = ["Candidate"]


@dataclass(eq=False)
class Candidate:
    """Generic physics object (particle, track, tower, jet, etc.).

    Candidates are owned by a :class:`CandidateArena`. Relations between
    candidates are expressed as arena indices, never as object references.
    Which attributes are meaningful depends on the module which produced the
    candidate; the others keep their default values.

    Attributes
    ----------
    id : int
        Index of the candidate in its arena, used as its unique identity
    momentum : np.ndarray
        (4) Momentum four-vector (px, py, pz, E)
    position : np.ndarray
        (4) Position four-vector (x, y, z, t) in mm
    candidates : List[int]
        Arena indices of the constituents of this candidate
    pid : int
        Particle ID code
    status : int
        Generator status code
    is_pu : int
        1 if the candidate originates from a pile-up interaction
    m1, m2 : int
        Indexes of the first and second mother
    d1, d2 : int
        Indexes of the first and last daughter
    charge : int
        Electric charge
    mass : float
        Generator mass
    eem, ehad : float
        Electromagnetic and hadronic calorimeter energy
    edges : np.ndarray
        (4) Calorimeter cell edges (eta_min, eta_max, phi_min, phi_max)
    n_time_hits : int
        Number of hits contributing to the time measurement
    isolation_var, isolation_var_rho_corr : float
        Isolation variables, without and with pile-up density correction
    sum_pt_charged, sum_pt_neutral, sum_pt_charged_pu, sum_pt : float
        Isolation cone transverse momentum sums
    dxy, sdxy : float
        Transverse impact parameter and its uncertainty
    xd, yd, zd : float
        Point of closest approach to the beam line
    trk_par : np.ndarray
        (5) Track parameters (see :class:`flattree.utils.consistency.TrackParam`)
    trk_cov : np.ndarray
        (15) Upper triangle of the track parameter covariance matrix
    area : float
        Jet catchment area
    delta_eta, delta_phi : float
        Jet width in pseudorapidity and azimuth
    flavor, flavor_algo, flavor_phys : int
        Jet flavour under three matching schemes
    btag, btag_algo, btag_phys : int
        Jet b-tagging bits under three matching schemes
    tau_tag : int
        Jet tau-tagging bit
    subjets : List[int]
        Arena indices of the subjets of a jet
    tracks : List[int]
        Arena indices of the tracks used to tag a jet
    n_charged, n_neutrals : int
        Number of charged and neutral jet constituents
    beta, beta_star, mean_sq_delta_r, ptd : float
        Pile-up jet identification variables
    n_subjets_trimmed, n_subjets_pruned, n_subjets_soft_dropped : int
        Number of subjets after each grooming procedure
    frac_pt : np.ndarray
        (5) Fraction of the jet pt in concentric rings
    tau : np.ndarray
        (5) N-subjettiness values
    trimmed_p4, pruned_p4, soft_dropped_p4 : np.ndarray
        (5, 4) Groomed jet four-vector followed by up to four subjets
    primary_vertex_tracks : List[VertexTrack]
        Tracks attached to the primary vertex
    secondary_vertices : List[DisplacedVertex]
        Secondary vertices found in the jet
    hl_sec_vx_tracks : List[VertexTrack]
        Tracks used by the high-level secondary vertex tagger
    hl_svx, ml_svx : VertexSummary
        High-level and medium-level secondary vertex summaries
    hl_trk : TrackSummary
        High-level track impact parameter summary
    truth_vertices : List[TruthVertexInfo]
        Generator-level decay vertices matched to the jet
    """

    id: int = -1
    momentum: np.ndarray = None
    position: np.ndarray = None
    candidates: List[int] = field(default_factory=list)

    # Generator information
    pid: int = 0
    status: int = 0
    is_pu: int = 0
    m1: int = -1
    m2: int = -1
    d1: int = -1
    d2: int = -1
    charge: int = 0
    mass: float = 0.0

    # Calorimeter information
    eem: float = 0.0
    ehad: float = 0.0
    edges: np.ndarray = None
    n_time_hits: int = 0

    # Isolation
    isolation_var: float = 0.0
    isolation_var_rho_corr: float = 0.0
    sum_pt_charged: float = 0.0
    sum_pt_neutral: float = 0.0
    sum_pt_charged_pu: float = 0.0
    sum_pt: float = 0.0

    # Tracking
    dxy: float = 0.0
    sdxy: float = 0.0
    xd: float = 0.0
    yd: float = 0.0
    zd: float = 0.0
    trk_par: np.ndarray = None
    trk_cov: np.ndarray = None

    # Jets
    area: float = 0.0
    delta_eta: float = 0.0
    delta_phi: float = 0.0
    flavor: int = 0
    flavor_algo: int = 0
    flavor_phys: int = 0
    btag: int = 0
    btag_algo: int = 0
    btag_phys: int = 0
    tau_tag: int = 0
    subjets: List[int] = field(default_factory=list)
    tracks: List[int] = field(default_factory=list)
    n_charged: int = 0
    n_neutrals: int = 0
    beta: float = 0.0
    beta_star: float = 0.0
    mean_sq_delta_r: float = 0.0
    ptd: float = 0.0
    n_subjets_trimmed: int = 0
    n_subjets_pruned: int = 0
    n_subjets_soft_dropped: int = 0
    frac_pt: np.ndarray = None
    tau: np.ndarray = None
    trimmed_p4: np.ndarray = None
    pruned_p4: np.ndarray = None
    soft_dropped_p4: np.ndarray = None

    # Flavour tagging
    primary_vertex_tracks: list = field(default_factory=list)
    secondary_vertices: list = field(default_factory=list)
    hl_sec_vx_tracks: list = field(default_factory=list)
    hl_svx: VertexSummary = field(default_factory=VertexSummary)
    ml_svx: VertexSummary = field(default_factory=VertexSummary)
    hl_trk: TrackSummary = field(default_factory=TrackSummary)
    truth_vertices: list = field(default_factory=list)

    # Array attributes as (key, shape) pairs
    _array_attrs = (
        ("momentum", 4),
        ("position", 4),
        ("edges", 4),
        ("trk_par", 5),
        ("trk_cov", 15),
        ("frac_pt", 5),
        ("tau", 5),
        ("trimmed_p4", (5, 4)),
        ("pruned_p4", (5, 4)),
        ("soft_dropped_p4", (5, 4)),
    )

    def __post_init__(self):
        """Gives zero-filled default values to the array attributes and casts
        the provided ones to double precision arrays.
        """
        for attr, shape in self._array_attrs:
            value = getattr(self, attr)
            if value is None:
                setattr(self, attr, np.zeros(shape, dtype=np.float64))
            else:
                setattr(self, attr, np.asarray(value, dtype=np.float64))

    @property
    def pt(self):
        """Transverse momentum of the candidate."""
        return pt(self.momentum)

    @property
    def is_leaf(self):
        """Whether the candidate has no constituent of its own."""
        return len(self.candidates) == 0

    def sort_key(self):
        """Key of the native candidate ordering (decreasing pt)."""
        return -self.pt
