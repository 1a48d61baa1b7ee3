"""Module with the jet record and its flavour-tagging substructure records."""

from dataclasses import dataclass
from typing import List

import numpy as np

from .base import DataBase

__all__ = [
    "SecondaryVertexTrack",
    "SecondaryVertex",
    "SecondaryVertexSummary",
    "TruthVertex",
    "Jet",
]


@dataclass(eq=False)
class SecondaryVertexTrack(DataBase):
    """Track attached to a primary or secondary vertex of a jet.

    Attributes
    ----------
    weight : float
        Weight of the track in the vertex fit
    d0, z0 : float
        Transverse and longitudinal impact parameters
    d0err, z0err : float
        Uncertainties on the impact parameters
    momentum : np.ndarray
        (3) Track momentum vector
    dphi, deta : float
        Azimuthal and pseudorapidity distance to the jet axis
    """

    weight: float = 0.0
    d0: float = 0.0
    z0: float = 0.0
    d0err: float = 0.0
    z0err: float = 0.0
    momentum: np.ndarray = None
    dphi: float = 0.0
    deta: float = 0.0

    # Fixed-length attributes
    _fixed_length_attrs = (("momentum", 3),)


@dataclass(eq=False)
class SecondaryVertex(DataBase):
    """Secondary vertex reconstructed inside a jet.

    Attributes
    ----------
    x, y, z : float
        Vertex position in mm
    lxy : float
        Transverse decay length
    lsig : float
        Decay length significance
    decay_length_variance : float
        Variance of the decay length
    n_tracks : int
        Number of tracks fitted to the vertex
    e_frac : float
        Fraction of the jet energy carried by the vertex tracks
    mass : float
        Invariant mass of the vertex tracks
    config : int
        Vertex finder configuration code
    tracks : List[SecondaryVertexTrack]
        Tracks attached to the vertex
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    lxy: float = 0.0
    lsig: float = 0.0
    decay_length_variance: float = 0.0
    n_tracks: int = 0
    e_frac: float = 0.0
    mass: float = 0.0
    config: int = 0
    tracks: List[SecondaryVertexTrack] = None

    # Nested record attributes
    _obj_attrs = (("tracks", SecondaryVertexTrack),)


@dataclass(eq=False)
class SecondaryVertexSummary(DataBase):
    """Summary of the secondary vertices of a jet.

    Attributes
    ----------
    n_vertices : int
        Number of secondary vertices
    n_tracks : int
        Number of tracks attached to the secondary vertices
    mass : float
        Invariant mass of the secondary vertex tracks
    energy_fraction : float
        Fraction of the jet energy carried by the secondary vertex tracks
    lsig : float
        Decay length significance
    dr_jet : float
        Angular distance between the flight direction and the jet axis
    """

    n_vertices: int = 0
    n_tracks: int = 0
    mass: float = 0.0
    energy_fraction: float = 0.0
    lsig: float = 0.0
    dr_jet: float = 0.0


@dataclass(eq=False)
class TruthVertex(DataBase):
    """Generator-level decay vertex matched to a jet."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    pdg_id: int = 0


@dataclass(eq=False)
class Jet(DataBase):
    """Reconstructed jet.

    Attributes
    ----------
    eta, phi, pt : float
        Pseudorapidity, azimuthal angle and transverse momentum
    t : float
        Jet time
    mass : float
        Invariant mass
    area : float
        Catchment area
    delta_eta, delta_phi : float
        Jet width in pseudorapidity and azimuth
    flavor, flavor_algo, flavor_phys : int
        Jet flavour under three matching schemes
    btag, btag_algo, btag_phys : int
        b-tagging bits under three matching schemes
    tau_tag : int
        tau-tagging bit
    charge : int
        Jet charge
    ehad_over_eem : float
        Ratio of the hadronic to the electromagnetic energy of the
        constituents (999.9 if there is no electromagnetic energy)
    n_charged, n_neutrals : int
        Number of charged and neutral constituents
    beta, beta_star : float
        Fractions of the charged pt from pile-up and from the hard interaction
    mean_sq_delta_r : float
        pt-weighted average squared distance of the constituents to the axis
    ptd : float
        pt dispersion of the constituents
    n_subjets_trimmed, n_subjets_pruned, n_subjets_soft_dropped : int
        Number of subjets after each grooming procedure
    frac_pt : np.ndarray
        (5) Fraction of the pt in rings of 0.1 in angular distance
    tau : np.ndarray
        (5) N-subjettiness values
    trimmed_p4, pruned_p4, soft_dropped_p4 : np.ndarray
        (5, 4) Groomed jet four-vector followed by up to four subjets
    primary_vertex_tracks : List[SecondaryVertexTrack]
        Tracks attached to the primary vertex
    secondary_vertices : List[SecondaryVertex]
        Secondary vertices, each with its own tracks
    hl_secondary_vertex_tracks : List[SecondaryVertexTrack]
        Tracks used by the high-level secondary vertex tagger
    hl_secondary_vertex : SecondaryVertexSummary
        High-level secondary vertex summary
    ml_secondary_vertex : SecondaryVertexSummary
        Medium-level secondary vertex summary
    hl_trk_ip2d_sig, hl_trk_ip3d_sig : np.ndarray
        (3) Impact parameter significances of the three most displaced tracks
    hl_trk_n_over_ip2d_threshold : int
        Number of tracks above the transverse significance threshold
    hl_trk_jet_prob : float
        Probability that all the tracks come from the primary vertex
    truth_vertices : List[TruthVertex]
        Generator-level decay vertices matched to the jet
    constituents : np.ndarray
        IDs of the direct constituents
    subjets : np.ndarray
        IDs of the subjets
    tracks : np.ndarray
        IDs of the tracks used for tagging
    particles : np.ndarray
        IDs of the leaf constituents
    """

    eta: float = 0.0
    phi: float = 0.0
    pt: float = 0.0
    t: float = 0.0
    mass: float = 0.0
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
    charge: int = 0
    ehad_over_eem: float = 0.0
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
    primary_vertex_tracks: List[SecondaryVertexTrack] = None
    secondary_vertices: List[SecondaryVertex] = None
    hl_secondary_vertex_tracks: List[SecondaryVertexTrack] = None
    hl_secondary_vertex: SecondaryVertexSummary = None
    ml_secondary_vertex: SecondaryVertexSummary = None
    hl_trk_ip2d_sig: np.ndarray = None
    hl_trk_ip3d_sig: np.ndarray = None
    hl_trk_n_over_ip2d_threshold: int = 0
    hl_trk_jet_prob: float = 0.0
    truth_vertices: List[TruthVertex] = None
    constituents: np.ndarray = None
    subjets: np.ndarray = None
    tracks: np.ndarray = None
    particles: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (
        ("frac_pt", 5),
        ("tau", 5),
        ("trimmed_p4", (5, 4)),
        ("pruned_p4", (5, 4)),
        ("soft_dropped_p4", (5, 4)),
        ("hl_trk_ip2d_sig", 3),
        ("hl_trk_ip3d_sig", 3),
    )

    # Variable-length attributes
    _var_length_attrs = (
        ("constituents", np.int64),
        ("subjets", np.int64),
        ("tracks", np.int64),
        ("particles", np.int64),
    )

    # Nested record attributes
    _obj_attrs = (
        ("primary_vertex_tracks", SecondaryVertexTrack),
        ("secondary_vertices", SecondaryVertex),
        ("hl_secondary_vertex_tracks", SecondaryVertexTrack),
        ("hl_secondary_vertex", SecondaryVertexSummary),
        ("ml_secondary_vertex", SecondaryVertexSummary),
        ("truth_vertices", TruthVertex),
    )

    # Nested record attributes which hold a single record
    _single_obj_attrs = ("hl_secondary_vertex", "ml_secondary_vertex")

    # Attributes specifying candidate IDs
    _index_attrs = ("constituents", "subjets", "tracks", "particles")
