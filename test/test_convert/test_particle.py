"""Tests for the particle and vertex converters."""

import numpy as np
import pytest

from flattree.convert import ParticleConverter, VertexConverter
from flattree.data import Particle, Vertex
from flattree.math import C_LIGHT, ETA_SENTINEL


class TestParticleConverter:
    """Test the conversion of generator-level particles."""

    def test_one_record_per_candidate(self, event, store, run):
        """Test that particles are converted 1:1, in collection order."""
        array = store.import_array("Delphes/allParticles")
        records = run(ParticleConverter(), array)
        assert len(records) == 4
        assert all(isinstance(r, Particle) for r in records)
        assert [r.candidate_id for r in records] == list(array.indices)
        assert [r.pid for r in records] == [13, 211, 22, 11]

    def test_fields(self, event, store, run):
        """Test the content of one converted particle."""
        array = store.import_array("Delphes/allParticles")
        pion = run(ParticleConverter(), array)[1]
        assert pion.status == 1
        assert pion.charge == 1
        assert pion.mass == 0.1396
        assert (pion.px, pion.py, pion.pz, pion.e) == (3.0, 4.0, 12.0, 13.0)
        assert pion.pt == 5.0
        assert pion.eta == pytest.approx(np.log(5.0))
        assert pion.phi == pytest.approx(np.arctan2(4.0, 3.0))
        assert pion.rapidity == pytest.approx(0.5 * np.log(25.0))
        assert (pion.x, pion.y, pion.z) == (0.1, 0.2, 0.3)
        assert pion.t == 0.0

    def test_time_conversion(self, event, store, run):
        """Test that the production time is converted from mm."""
        array = store.import_array("Delphes/allParticles")
        muon = run(ParticleConverter(), array)[0]
        assert muon.t == 3.0 * 1.0e-3 / C_LIGHT

    def test_lineage(self, store, run):
        """Test that the mother/daughter indexes and pile-up flag are kept."""
        cand = store.new_candidate(m1=0, m2=1, d1=4, d2=6, is_pu=1)
        array = store.export_array("particles")
        array.append(cand)
        record = run(ParticleConverter(), array)[0]
        assert (record.m1, record.m2, record.d1, record.d2) == (0, 1, 4, 6)
        assert record.is_pu == 1

    def test_beam_axis(self, store, run):
        """Test the sentinel pseudorapidity of a particle along the beam."""
        array = store.export_array("particles")
        array.append(store.new_candidate(momentum=[0.0, 0.0, -50.0, 50.0]))
        record = run(ParticleConverter(), array)[0]
        assert record.eta == -ETA_SENTINEL
        assert record.rapidity == -ETA_SENTINEL
        assert record.pt == 0.0

    def test_empty(self, store, run):
        """Test that an empty collection produces no record."""
        assert run(ParticleConverter(), store.export_array("particles")) == []


def test_vertex_converter(store, run):
    """Test the conversion of vertices."""
    array = store.export_array("vertices")
    array.append(store.new_candidate(position=[1.0, 2.0, 3.0, 4.0]))
    records = run(VertexConverter(), array)
    assert len(records) == 1
    assert records[0] == Vertex(x=1.0, y=2.0, z=3.0, t=4.0e-3 / C_LIGHT)
