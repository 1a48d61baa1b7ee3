"""Tests for the event-level converters."""

import numpy as np
import pytest

from flattree.convert import (
    MissingETConverter,
    RhoConverter,
    ScalarHTConverter,
    WeightConverter,
)
from flattree.math import ETA_SENTINEL


class TestSingletons:
    """Test the converters which produce at most one record per event."""

    @pytest.mark.parametrize(
        "cls", [MissingETConverter, ScalarHTConverter, WeightConverter]
    )
    def test_empty(self, cls, store, run):
        """Test that an empty collection produces no record."""
        assert run(cls(), store.export_array("empty")) == []

    @pytest.mark.parametrize(
        "cls", [MissingETConverter, ScalarHTConverter, WeightConverter]
    )
    def test_first_only(self, cls, store, run):
        """Test that only the first candidate is converted."""
        array = store.export_array("summary")
        array.append(store.new_candidate(momentum=[1.0, 0.0, 0.0, 2.0]))
        array.append(store.new_candidate(momentum=[9.0, 0.0, 0.0, 9.0]))
        assert len(run(cls(), array)) == 1

    def test_singleton_ignores_sorting(self, store, run):
        """Test that singletons do not reorder their input."""
        array = store.export_array("summary")
        array.append(store.new_candidate(momentum=[1.0, 0.0, 0.0, 1.0]))
        array.append(store.new_candidate(momentum=[5.0, 0.0, 0.0, 5.0]))
        record = run(ScalarHTConverter(sort_in_place=True), array)[0]
        assert record.ht == 1.0


class TestMissingET:
    """Test the conversion of the missing transverse energy."""

    def test_direction(self, event, store, run):
        """Test that the missing momentum opposes the visible momentum."""
        met = run(MissingETConverter(), store.import_array("MissingET/momentum"))[0]
        assert met.met == 5.0
        assert met.phi == pytest.approx(np.arctan2(-4.0, -3.0))
        assert met.eta == 0.0

    def test_longitudinal(self, store, run):
        """Test the pseudorapidity of the missing momentum."""
        array = store.export_array("met")
        array.append(store.new_candidate(momentum=[3.0, 4.0, 12.0, 13.0]))
        met = run(MissingETConverter(), array)[0]
        assert met.eta == pytest.approx(-np.log(5.0))

    def test_null(self, store, run):
        """Test that a null missing momentum takes the sentinel direction."""
        array = store.export_array("met")
        array.append(store.new_candidate())
        met = run(MissingETConverter(), array)[0]
        assert met.met == 0.0
        assert met.eta == ETA_SENTINEL
        assert met.phi == 0.0


def test_scalar_ht(event, store, run):
    """Test the conversion of the scalar HT."""
    ht = run(ScalarHTConverter(), store.import_array("ScalarHT/energy"))[0]
    assert ht.ht == 100.0


def test_weight(event, store, run):
    """Test the conversion of the event weight."""
    weight = run(WeightConverter(), store.import_array("Weight/weight"))[0]
    assert weight.weight == 0.75


def test_rho(event, store, run):
    """Test that rho is converted once per region."""
    records = run(RhoConverter(), store.import_array("Rho/rho"))
    assert [r.rho for r in records] == [12.0, 4.0]
    assert records[0].edges.tolist() == [0.0, 2.5]
    assert records[1].edges.tolist() == [2.5, 5.0]
