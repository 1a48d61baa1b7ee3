"""Binding of the output branches to their converter and input collection."""

from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass

from flattree.convert.base import ConverterBase
from flattree.convert.factories import CONVERTER_DICT, converter_factory
from flattree.candidate import CandidateArray
from flattree.io.write.base import TreeBranch
from flattree.utils.logger import logger

__all__ = ["BranchEntry", "BranchRegistry", "parse_triples"]


@dataclass(frozen=True)
class BranchEntry:
    """Binding of one output branch.

    Attributes
    ----------
    name : str
        Name of the output branch
    converter : ConverterBase
        Converter which fills the branch
    array : CandidateArray
        Input candidate collection
    branch : TreeBranch
        Output branch handle
    """

    name: str
    converter: ConverterBase
    array: CandidateArray
    branch: TreeBranch

    def process(self):
        """Converts the current content of the input collection."""
        self.converter(self.branch, self.array)


def parse_triples(triples):
    """Groups a branch configuration into (input, branch, class) triples.

    The configuration may either be a flat list of names, read three at a
    time, or a list of 3-item lists.

    .. code-block:: yaml

        branch:
          - [Delphes/allParticles, Particle, GenParticle]
          - [TrackMerger/tracks, Track, Track]

    Parameters
    ----------
    triples : List[Union[str, List[str]]]
        Branch configuration

    Returns
    -------
    List[Tuple[str, str, str]]
        (input collection name, output branch name, output class name)
    """
    if triples is None:
        return []

    # Nested configuration, one list per branch
    triples = list(triples)
    if all(isinstance(t, (list, tuple)) for t in triples):
        parsed = []
        for triple in triples:
            if len(triple) != 3:
                logger.warning(
                    "Ignoring malformed branch configuration %s, expected "
                    "[input, branch, class].",
                    list(triple),
                )
                continue
            parsed.append(tuple(str(v) for v in triple))

        return parsed

    # Flat configuration, read three values at a time
    num_triples, remainder = divmod(len(triples), 3)
    if remainder:
        logger.warning(
            "The branch configuration has %d trailing value(s) which do not "
            "form a complete [input, branch, class] triple, ignoring: %s",
            remainder,
            triples[-remainder:],
        )

    return [
        tuple(str(v) for v in triples[3 * i : 3 * i + 3]) for i in range(num_triples)
    ]


class BranchRegistry(Mapping):
    """Read-only, ordered mapping of the output branch names to their entry.

    The registry is built once, before the first event. Configuration
    problems (unknown output class, unknown input collection) are reported
    and the offending branch is skipped, the other branches are unaffected.
    """

    def __init__(self, entries=None):
        """Initialize the registry.

        Parameters
        ----------
        entries : List[BranchEntry], optional
            Branch entries, in processing order
        """
        self._entries = OrderedDict()
        for entry in entries or ():
            self._entries[entry.name] = entry

    def __getitem__(self, name):
        return self._entries[name]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"BranchRegistry({list(self._entries.keys())})"

    @classmethod
    def build(cls, triples, store, tree, **converter_kwargs):
        """Builds the registry from a branch configuration.

        Parameters
        ----------
        triples : List[Union[str, List[str]]]
            Branch configuration (see :func:`parse_triples`)
        store : EventStore
            Event store used to resolve the input collection names
        tree : TreeBase
            Output tree in which the branches are created
        **converter_kwargs : dict, optional
            Options passed to every converter

        Returns
        -------
        BranchRegistry
            Registry of the valid branches
        """
        entries = OrderedDict()
        for input_name, branch_name, class_name in parse_triples(triples):
            # Resolve the output class to a converter
            if class_name not in CONVERTER_DICT:
                logger.error(
                    "Ignoring branch `%s`: no converter for output class "
                    "`%s`. Available classes: %s",
                    branch_name,
                    class_name,
                    list(CONVERTER_DICT.keys()),
                )
                continue

            # Resolve the input collection
            try:
                array = store.import_array(input_name)
            except KeyError as err:
                logger.error(
                    "Ignoring branch `%s`: %s", branch_name, err.args[0]
                )
                continue

            # Flag branches which are bound more than once, keep the last one
            if branch_name in entries:
                logger.warning(
                    "Output branch `%s` is configured more than once, the "
                    "binding to `%s` replaces the binding to `%s`.",
                    branch_name,
                    input_name,
                    entries[branch_name].array.name,
                )

            converter = converter_factory(class_name, **converter_kwargs)
            branch = tree.new_branch(branch_name, converter.record)
            entries[branch_name] = BranchEntry(branch_name, converter, array, branch)

        return cls(entries.values())
