"""Tests for the candidate arena and its collections."""

import numpy as np
import pytest

from flattree.candidate import Candidate, CandidateArena, CandidateArray


class TestCandidate:
    """Test the generic candidate."""

    def test_defaults(self):
        """Test that array attributes get independent zero defaults."""
        first, second = Candidate(), Candidate()
        assert first.momentum.shape == (4,)
        assert first.trimmed_p4.shape == (5, 4)
        first.momentum[0] = 1.0
        assert second.momentum[0] == 0.0
        assert first.is_leaf

    def test_cast(self):
        """Test that provided arrays are cast to double precision."""
        cand = Candidate(momentum=[3, 4, 0, 5])
        assert cand.momentum.dtype == np.float64
        assert cand.pt == 5.0
        assert cand.sort_key() == -5.0


class TestArena:
    """Test the ownership of candidates."""

    def test_ids(self):
        """Test that candidates are identified by their arena index."""
        arena = CandidateArena()
        first = arena.new_candidate()
        second = arena.new_candidate(candidates=[first.id])
        assert (first.id, second.id) == (0, 1)
        assert arena[1] is second
        assert arena.constituents(second) == [first]
        assert arena.first_constituent(second) is first
        assert arena.first_constituent(first) is None

    def test_id_reserved(self):
        """Test that the ID cannot be chosen by the caller."""
        with pytest.raises(AssertionError):
            CandidateArena().new_candidate(id=3)

    def test_depth(self):
        """Test the nesting depth of a chain."""
        arena = CandidateArena()
        particle = arena.new_candidate()
        track = arena.new_candidate(candidates=[particle.id])
        tower = arena.new_candidate(candidates=[track.id, particle.id])
        assert arena.depth(particle) == 0
        assert arena.depth(tower) == 2


class TestCollections:
    """Test the named candidate collections."""

    def test_sorted_view(self, store):
        """Test that the sorted view leaves the collection untouched."""
        array = store.export_array("objects")
        for px in (1.0, 3.0, 2.0):
            array.append(store.new_candidate(momentum=[px, 0.0, 0.0, px]))
        view = array.sorted()
        assert isinstance(view, CandidateArray)
        assert [c.pt for c in view] == [3.0, 2.0, 1.0]
        assert [c.pt for c in array] == [1.0, 3.0, 2.0]

        array.sort()
        assert [c.pt for c in array] == [3.0, 2.0, 1.0]

    def test_foreign_candidate(self, store):
        """Test that only candidates of the arena can be added."""
        array = store.export_array("objects")
        store.new_candidate()
        with pytest.raises(AssertionError):
            array.append(Candidate(id=0))

    def test_import(self, store):
        """Test the resolution of collection names."""
        array = store.export_array("objects")
        assert store.import_array("objects") is array
        assert store.export_array("objects") is array
        assert "objects" in store
        with pytest.raises(KeyError):
            store.import_array("missing")

    def test_clear(self, store):
        """Test that clearing the store keeps the collection handles."""
        array = store.export_array("objects")
        array.append(store.new_candidate())
        store.clear()
        assert len(store.arena) == 0
        assert len(array) == 0
        assert store.import_array("objects") is array
        assert array.first() is None
