"""Fixtures shared by the converter tests."""

import pytest

from flattree.io.write.base import TreeBranch


@pytest.fixture(name="run")
def fixture_run():
    """Returns a function which converts a collection into a fresh branch."""

    def run(converter, array):
        branch = TreeBranch(converter.name, converter.record)
        converter(branch, array)
        return branch.records

    return run
