"""Converters of generator-level particles and vertices."""

from flattree.data import Particle, Vertex
from flattree.math import kinematics

from .base import ConverterBase

__all__ = ["ParticleConverter", "VertexConverter"]


class ParticleConverter(ConverterBase):
    """Converts generator-level particles.

    .. code-block:: yaml

        branch:
          - [Delphes/allParticles, Particle, Particle]
    """

    # Name of the output record class (as specified in the configuration)
    name = "Particle"

    # Alternative allowed names of the output record class
    aliases = ("GenParticle",)

    # Output record class
    record = Particle

    def convert(self, candidate, arena):
        """Converts one particle candidate."""
        momentum, position = candidate.momentum, candidate.position
        pt, eta, phi, rapidity = kinematics(momentum)

        return Particle(
            candidate_id=candidate.id,
            pid=candidate.pid,
            status=candidate.status,
            is_pu=candidate.is_pu,
            m1=candidate.m1,
            m2=candidate.m2,
            d1=candidate.d1,
            d2=candidate.d2,
            charge=candidate.charge,
            mass=candidate.mass,
            e=float(momentum[3]),
            px=float(momentum[0]),
            py=float(momentum[1]),
            pz=float(momentum[2]),
            eta=eta,
            phi=phi,
            pt=pt,
            rapidity=rapidity,
            x=float(position[0]),
            y=float(position[1]),
            z=float(position[2]),
            t=self.time(candidate),
        )


class VertexConverter(ConverterBase):
    """Converts interaction vertices (position and time only)."""

    # Name of the output record class (as specified in the configuration)
    name = "Vertex"

    # Output record class
    record = Vertex

    def convert(self, candidate, arena):
        """Converts one vertex candidate."""
        position = candidate.position

        return Vertex(
            x=float(position[0]),
            y=float(position[1]),
            z=float(position[2]),
            t=self.time(candidate),
        )
