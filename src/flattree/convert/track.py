"""Converter of reconstructed tracks."""

from flattree.data import Track
from flattree.math import eta, phi, pt
from flattree.utils.consistency import validate_track

from .base import ConverterBase

__all__ = ["TrackConverter"]


class TrackConverter(ConverterBase):
    """Converts reconstructed charged particle tracks.

    The outer direction and position come from the position four-vector of
    the track (its extrapolation to the outer tracker surface), the
    kinematics from its momentum. The origin of the track is taken from its
    first constituent, the particle it was built from.

    If `check_consistency` is enabled, each converted track is checked for
    agreement between its impact parameters and its track parameter vector.

    .. code-block:: yaml

        branch:
          - [TrackMerger/tracks, Track, Track]
    """

    # Name of the output record class (as specified in the configuration)
    name = "Track"

    # Output record class
    record = Track

    def convert(self, candidate, arena):
        """Converts one track candidate.

        Raises
        ------
        TrackConsistencyError
            If the consistency check is enabled and fails
        """
        momentum, position = candidate.momentum, candidate.position
        track = Track(
            candidate_id=candidate.id,
            pid=candidate.pid,
            charge=candidate.charge,
            eta_outer=eta(position),
            phi_outer=phi(position),
            x_outer=float(position[0]),
            y_outer=float(position[1]),
            z_outer=float(position[2]),
            t_outer=self.time(candidate),
            dxy=candidate.dxy,
            sdxy=candidate.sdxy,
            xd=candidate.xd,
            yd=candidate.yd,
            zd=candidate.zd,
            trk_par=candidate.trk_par.copy(),
            trk_cov=candidate.trk_cov.copy(),
            eta=eta(momentum),
            phi=phi(momentum),
            pt=pt(momentum),
        )

        # Origin of the track, if it is known
        particle = arena.first_constituent(candidate)
        if particle is not None:
            track.x = float(particle.position[0])
            track.y = float(particle.position[1])
            track.z = float(particle.position[2])
            track.t = self.time(particle)
            track.particle = particle.id

        if self.check_consistency:
            validate_track(track)

        return track
