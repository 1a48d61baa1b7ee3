"""Converters of isolated objects (photons, electrons and muons).

These converters order their input by decreasing transverse momentum before
converting it.
"""

from flattree.data import Electron, Muon, Photon
from flattree.math import RATIO_SENTINEL, eta, phi, pt
from flattree.utils.constituents import flatten_constituents

from .base import ConverterBase

__all__ = ["PhotonConverter", "ElectronConverter", "MuonConverter"]

# Isolation attributes shared by the candidates and the isolated records
ISOLATION_ATTRS = (
    "isolation_var",
    "isolation_var_rho_corr",
    "sum_pt_charged",
    "sum_pt_neutral",
    "sum_pt_charged_pu",
    "sum_pt",
)


class IsolatedConverterBase(ConverterBase):
    """Shared conversion of the kinematics and isolation of an object."""

    # Whether the input must be ordered by decreasing pt
    sort = True

    def common(self, candidate):
        """Attributes shared by all isolated records.

        Parameters
        ----------
        candidate : Candidate
            Isolated object candidate

        Returns
        -------
        dict
            Kinematics, time and isolation attributes
        """
        momentum = candidate.momentum
        attrs = {
            "eta": eta(momentum),
            "phi": phi(momentum),
            "pt": pt(momentum),
            "t": self.time(candidate),
        }
        for attr in ISOLATION_ATTRS:
            attrs[attr] = getattr(candidate, attr)

        return attrs


class PhotonConverter(IsolatedConverterBase):
    """Converts reconstructed photons."""

    # Name of the output record class (as specified in the configuration)
    name = "Photon"

    # Output record class
    record = Photon

    def convert(self, candidate, arena):
        """Converts one photon candidate."""
        if candidate.eem > 0.0:
            ehad_over_eem = candidate.ehad / candidate.eem
        else:
            ehad_over_eem = RATIO_SENTINEL

        return Photon(
            e=float(candidate.momentum[3]),
            ehad_over_eem=ehad_over_eem,
            particles=[c.id for c in flatten_constituents(candidate, arena)],
            **self.common(candidate),
        )


class ElectronConverter(IsolatedConverterBase):
    """Converts reconstructed electrons.

    The hadronic over electromagnetic energy ratio is not computed for
    electrons, it is always set to 0.
    """

    # Name of the output record class (as specified in the configuration)
    name = "Electron"

    # Output record class
    record = Electron

    def convert(self, candidate, arena):
        """Converts one electron candidate."""
        return Electron(
            charge=candidate.charge,
            ehad_over_eem=0.0,
            particle=self.reference(arena.first_constituent(candidate)),
            **self.common(candidate),
        )


class MuonConverter(IsolatedConverterBase):
    """Converts reconstructed muons."""

    # Name of the output record class (as specified in the configuration)
    name = "Muon"

    # Output record class
    record = Muon

    def convert(self, candidate, arena):
        """Converts one muon candidate."""
        return Muon(
            candidate_id=candidate.id,
            charge=candidate.charge,
            particle=self.reference(arena.first_constituent(candidate)),
            **self.common(candidate),
        )
