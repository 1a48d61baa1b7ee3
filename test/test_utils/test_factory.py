"""Tests for the name to class tables and their instantiation."""

import warnings

import pytest

from flattree import convert
from flattree.convert import (
    JetConverter,
    ParticleConverter,
    TrackConverter,
    converter_factory,
)
from flattree.convert.factories import CONVERTER_DICT
from flattree.io import HDF5Tree, MemoryTree, writer_factory
from flattree.utils.factory import instantiate, module_dict

# Names of the output record classes which can be produced
RECORD_NAMES = (
    "Particle",
    "Vertex",
    "Track",
    "Tower",
    "Photon",
    "Electron",
    "Muon",
    "Jet",
    "MissingET",
    "ScalarHT",
    "Rho",
    "Weight",
    "HectorHit",
)


class TestConverterDict:
    """Test the table of available converters."""

    def test_all_records(self):
        """Test that each output class is served by a converter."""
        for name in RECORD_NAMES:
            assert name in CONVERTER_DICT
            assert CONVERTER_DICT[name].record.__name__ == name

    def test_alias(self):
        """Test that generator particles are reachable under their alias."""
        assert CONVERTER_DICT["GenParticle"] is ParticleConverter

    def test_alias_no_warning(self):
        """Test that the alias instantiates silently."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            converter = converter_factory("GenParticle")
        assert isinstance(converter, ParticleConverter)

    def test_no_base_class(self):
        """Test that the abstract bases are not exposed."""
        assert "" not in CONVERTER_DICT
        assert "ConverterBase" not in CONVERTER_DICT
        assert "IsolatedConverterBase" not in CONVERTER_DICT

    def test_case_sensitive(self):
        """Test that class names are case sensitive."""
        assert "jet" not in CONVERTER_DICT
        with pytest.raises(ValueError):
            converter_factory("jet")

    def test_module_dict(self):
        """Test that the package-level table matches the factory table."""
        assert module_dict(convert) == CONVERTER_DICT


class TestInstantiate:
    """Test the instantiation of classes from configuration blocks."""

    def test_converter_options(self):
        """Test that the converter options are forwarded."""
        converter = converter_factory("Jet", sort_in_place=True)
        assert isinstance(converter, JetConverter)
        assert converter.sort_in_place
        assert converter.check_consistency

        converter = converter_factory("Track", check_consistency=False)
        assert isinstance(converter, TrackConverter)
        assert not converter.check_consistency

    def test_string_config(self):
        """Test that a bare name instantiates a writer with no arguments."""
        assert isinstance(writer_factory("memory"), MemoryTree)

    def test_kwargs_config(self, tmp_path):
        """Test that arguments may be nested under `kwargs`."""
        file_name = str(tmp_path / "out.h5")
        cfg = {"name": "hdf5", "kwargs": {"file_name": file_name}}
        with writer_factory(cfg) as tree:
            assert isinstance(tree, HDF5Tree)
            assert tree.file_name == file_name

    def test_ambiguous_config(self):
        """Test that an argument cannot be given twice."""
        cfg = {"name": "hdf5", "file_name": "a.h5", "kwargs": {"file_name": "b.h5"}}
        with pytest.raises(AssertionError):
            instantiate({"hdf5": HDF5Tree}, cfg)

    def test_bad_arguments(self):
        """Test that unexpected arguments are rejected."""
        with pytest.raises(TypeError):
            writer_factory({"name": "memory", "file_name": "out.h5"})
