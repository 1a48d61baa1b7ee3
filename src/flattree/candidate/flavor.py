"""Flavour-tagging inputs attached to jet candidates.

These are filled by the upstream vertexing and tagging modules. The jet
converter copies them field-for-field into the corresponding output records
of :mod:`flattree.data.jet`.
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

__all__ = [
    "VertexTrack",
    "DisplacedVertex",
    "VertexSummary",
    "TrackSummary",
    "TruthVertexInfo",
]


@dataclass
class VertexTrack:
    """Track associated with a primary or secondary vertex.

    Attributes
    ----------
    weight : float
        Weight of the track in the vertex fit
    d0 : float
        Transverse impact parameter
    z0 : float
        Longitudinal impact parameter
    d0err : float
        Uncertainty on the transverse impact parameter
    z0err : float
        Uncertainty on the longitudinal impact parameter
    momentum : np.ndarray
        (3) Track momentum vector
    dphi : float
        Azimuthal distance to the jet axis
    deta : float
        Pseudorapidity distance to the jet axis
    """

    weight: float = 0.0
    d0: float = 0.0
    z0: float = 0.0
    d0err: float = 0.0
    z0err: float = 0.0
    momentum: np.ndarray = field(default_factory=lambda: np.zeros(3))
    dphi: float = 0.0
    deta: float = 0.0


@dataclass
class DisplacedVertex:
    """Reconstructed secondary vertex found inside a jet.

    Attributes
    ----------
    position : np.ndarray
        (3) Vertex position (x, y, z) in mm
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
    tracks_along_jet : List[VertexTrack]
        Tracks attached to the vertex, ordered along the jet axis
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    lxy: float = 0.0
    lsig: float = 0.0
    decay_length_variance: float = 0.0
    n_tracks: int = 0
    e_frac: float = 0.0
    mass: float = 0.0
    config: int = 0
    tracks_along_jet: List[VertexTrack] = field(default_factory=list)


@dataclass
class VertexSummary:
    """Aggregated secondary vertex information of a jet.

    Used for both the high-level and the medium-level vertex summaries.
    """

    n_vertices: int = 0
    n_tracks: int = 0
    mass: float = 0.0
    energy_fraction: float = 0.0
    lsig: float = 0.0
    dr_jet: float = 0.0


@dataclass
class TrackSummary:
    """High-level impact parameter summary of the tracks of a jet.

    Attributes
    ----------
    ip2d_sig : np.ndarray
        (3) Transverse impact parameter significances of the three most
        displaced tracks
    ip3d_sig : np.ndarray
        (3) Three-dimensional impact parameter significances of the three
        most displaced tracks
    n_over_ip2d_threshold : int
        Number of tracks above the transverse significance threshold
    jet_prob : float
        Probability that all the tracks originate from the primary vertex
    """

    ip2d_sig: np.ndarray = field(default_factory=lambda: np.zeros(3))
    ip3d_sig: np.ndarray = field(default_factory=lambda: np.zeros(3))
    n_over_ip2d_threshold: int = 0
    jet_prob: float = 0.0


@dataclass
class TruthVertexInfo:
    """Generator-level decay vertex matched to a jet."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    pdg_id: int = 0
