"""Tests for the calorimeter tower converter."""

import numpy as np
import pytest

from flattree.convert import TowerConverter
from flattree.math import C_LIGHT


def test_tower_fields(event, store, run):
    """Test the content of the converted towers."""
    array = store.import_array("Calorimeter/towers")
    records = run(TowerConverter(), array)
    assert len(records) == 2

    tower = records[0]
    assert tower.candidate_id == event["towers"][0].id
    assert tower.et == 10.0
    assert tower.e == 10.0
    assert tower.eta == 0.0
    assert tower.phi == pytest.approx(np.pi / 2)
    assert (tower.eem, tower.ehad) == (9.0, 1.0)
    assert tower.edges.tolist() == [-0.1, 0.1, 1.5, 1.6]
    assert tower.t == 2.0 * 1.0e-3 / C_LIGHT
    assert tower.n_time_hits == 2


def test_tower_particles(event, store, run):
    """Test that towers reference their leaf particles."""
    array = store.import_array("Calorimeter/towers")
    records = run(TowerConverter(), array)
    _, pion, photon, _ = event["particles"]
    assert records[0].particles.tolist() == [photon.id]
    assert records[1].particles.tolist() == [pion.id]
