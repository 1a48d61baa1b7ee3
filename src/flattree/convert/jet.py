"""Converter of reconstructed jets and of their flavour-tagging inputs."""

from flattree.data import (
    Jet,
    SecondaryVertex,
    SecondaryVertexSummary,
    SecondaryVertexTrack,
    TruthVertex,
)
from flattree.math import RATIO_SENTINEL, eta, mass, phi, pt
from flattree.utils.constituents import flatten_constituents

from .base import ConverterBase

__all__ = ["JetConverter"]

# Jet attributes copied as is from the candidate
JET_ATTRS = (
    "area",
    "delta_eta",
    "delta_phi",
    "flavor",
    "flavor_algo",
    "flavor_phys",
    "btag",
    "btag_algo",
    "btag_phys",
    "tau_tag",
    "charge",
    "n_charged",
    "n_neutrals",
    "beta",
    "beta_star",
    "mean_sq_delta_r",
    "ptd",
    "n_subjets_trimmed",
    "n_subjets_pruned",
    "n_subjets_soft_dropped",
)

# Jet substructure arrays copied from the candidate
JET_ARRAY_ATTRS = ("frac_pt", "tau", "trimmed_p4", "pruned_p4", "soft_dropped_p4")


def copy_vertex_track(track):
    """Copies a vertex track into a fresh output record.

    Parameters
    ----------
    track : VertexTrack
        Track attached to a vertex of a jet candidate

    Returns
    -------
    SecondaryVertexTrack
        Output record
    """
    return SecondaryVertexTrack(
        weight=track.weight,
        d0=track.d0,
        z0=track.z0,
        d0err=track.d0err,
        z0err=track.z0err,
        momentum=track.momentum,
        dphi=track.dphi,
        deta=track.deta,
    )


def copy_secondary_vertex(vertex):
    """Copies a displaced vertex, and its tracks, into a fresh output record.

    Parameters
    ----------
    vertex : DisplacedVertex
        Secondary vertex of a jet candidate

    Returns
    -------
    SecondaryVertex
        Output record
    """
    return SecondaryVertex(
        x=float(vertex.position[0]),
        y=float(vertex.position[1]),
        z=float(vertex.position[2]),
        lxy=vertex.lxy,
        lsig=vertex.lsig,
        decay_length_variance=vertex.decay_length_variance,
        n_tracks=vertex.n_tracks,
        e_frac=vertex.e_frac,
        mass=vertex.mass,
        config=vertex.config,
        tracks=[copy_vertex_track(t) for t in vertex.tracks_along_jet],
    )


def copy_vertex_summary(summary):
    """Copies a secondary vertex summary into a fresh output record."""
    return SecondaryVertexSummary(
        n_vertices=summary.n_vertices,
        n_tracks=summary.n_tracks,
        mass=summary.mass,
        energy_fraction=summary.energy_fraction,
        lsig=summary.lsig,
        dr_jet=summary.dr_jet,
    )


def copy_truth_vertex(vertex):
    """Copies a generator-level vertex into a fresh output record."""
    return TruthVertex(x=vertex.x, y=vertex.y, z=vertex.z, pdg_id=vertex.pdg_id)


class JetConverter(ConverterBase):
    """Converts reconstructed jets.

    Jets are ordered by decreasing transverse momentum before conversion.
    Nested flavour-tagging information is copied field-for-field into fresh
    records, so that the output never shares memory with the candidates.

    The hadronic over electromagnetic energy ratio is computed from the
    direct constituents of the jet, while the `particles` of the jet are its
    constituents flattened down to leaf candidates.
    """

    # Name of the output record class (as specified in the configuration)
    name = "Jet"

    # Output record class
    record = Jet

    # Whether the input must be ordered by decreasing pt
    sort = True

    def convert(self, candidate, arena):
        """Converts one jet candidate."""
        momentum = candidate.momentum
        attrs = {
            "eta": eta(momentum),
            "phi": phi(momentum),
            "pt": pt(momentum),
            "t": self.time(candidate),
            "mass": mass(momentum),
        }

        # Scalar and array attributes, arrays are copied by the record
        for attr in JET_ATTRS + JET_ARRAY_ATTRS:
            attrs[attr] = getattr(candidate, attr)

        # Flavour-tagging substructure
        attrs["primary_vertex_tracks"] = [
            copy_vertex_track(t) for t in candidate.primary_vertex_tracks
        ]
        attrs["secondary_vertices"] = [
            copy_secondary_vertex(v) for v in candidate.secondary_vertices
        ]
        attrs["hl_secondary_vertex_tracks"] = [
            copy_vertex_track(t) for t in candidate.hl_sec_vx_tracks
        ]
        attrs["hl_secondary_vertex"] = copy_vertex_summary(candidate.hl_svx)
        attrs["ml_secondary_vertex"] = copy_vertex_summary(candidate.ml_svx)
        attrs["truth_vertices"] = [
            copy_truth_vertex(v) for v in candidate.truth_vertices
        ]

        # High-level track summary, stored flat in the jet
        hl_trk = candidate.hl_trk
        attrs["hl_trk_ip2d_sig"] = hl_trk.ip2d_sig
        attrs["hl_trk_ip3d_sig"] = hl_trk.ip3d_sig
        attrs["hl_trk_n_over_ip2d_threshold"] = hl_trk.n_over_ip2d_threshold
        attrs["hl_trk_jet_prob"] = hl_trk.jet_prob

        # Direct constituents and their energy sharing
        constituents = arena.constituents(candidate)
        eem = sum(c.eem for c in constituents)
        ehad = sum(c.ehad for c in constituents)
        attrs["ehad_over_eem"] = ehad / eem if eem > 0.0 else RATIO_SENTINEL
        attrs["constituents"] = [c.id for c in constituents]

        # References to the subjets, tagging tracks and leaf constituents
        attrs["subjets"] = candidate.subjets
        attrs["tracks"] = candidate.tracks
        attrs["particles"] = [
            c.id for c in flatten_constituents(candidate, arena)
        ]

        return Jet(**attrs)
