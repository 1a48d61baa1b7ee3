"""Event-scope ownership of candidates and named candidate collections.

Upstream modules create candidates through the :class:`EventStore` and
publish them in named :class:`CandidateArray` collections. The arrays only
hold arena indices, so a candidate shared by several collections (or
referenced as a constituent by several other candidates) exists once.
"""

from collections import OrderedDict

from .candidate import Candidate

__all__ = ["CandidateArena", "CandidateArray", "EventStore"]


class CandidateArena:
    """Owns all the candidates of one event."""

    def __init__(self):
        """Initialize an empty arena."""
        self._candidates = []

    def __len__(self):
        return len(self._candidates)

    def __getitem__(self, index):
        return self._candidates[index]

    def __iter__(self):
        return iter(self._candidates)

    def new_candidate(self, **kwargs):
        """Creates a candidate, stores it in the arena and returns it.

        Parameters
        ----------
        **kwargs : dict
            Attributes of the candidate (see :class:`Candidate`)

        Returns
        -------
        Candidate
            Candidate, with its `id` set to its arena index
        """
        assert "id" not in kwargs, "The candidate ID is assigned by the arena."
        candidate = Candidate(id=len(self._candidates), **kwargs)
        self._candidates.append(candidate)

        return candidate

    def constituents(self, candidate):
        """Returns the constituent candidates of a candidate.

        Parameters
        ----------
        candidate : Candidate
            Parent candidate

        Returns
        -------
        List[Candidate]
            Constituents, in the order they were attached
        """
        return [self._candidates[i] for i in candidate.candidates]

    def first_constituent(self, candidate):
        """Returns the first constituent of a candidate, if any."""
        if not candidate.candidates:
            return None

        return self._candidates[candidate.candidates[0]]

    def depth(self, candidate):
        """Number of constituent levels below a candidate.

        A leaf has a depth of 0. The upstream modules guarantee that no chain
        is deeper than 3 (particle, track, tower), and never cyclic.

        Parameters
        ----------
        candidate : Candidate
            Candidate to measure

        Returns
        -------
        int
            Maximum nesting depth
        """
        if candidate.is_leaf:
            return 0

        return 1 + max(self.depth(c) for c in self.constituents(candidate))

    def clear(self):
        """Drops all the candidates of the current event."""
        self._candidates.clear()


class CandidateArray:
    """Ordered, named collection of candidates of an arena.

    Attributes
    ----------
    name : str
        Name under which the collection is published
    arena : CandidateArena
        Arena which owns the candidates
    """

    def __init__(self, name, arena, indices=None):
        """Initialize the collection.

        Parameters
        ----------
        name : str
            Name of the collection
        arena : CandidateArena
            Arena which owns the candidates
        indices : List[int], optional
            Initial arena indices
        """
        self.name = name
        self.arena = arena
        self._indices = list(indices) if indices is not None else []

    def __len__(self):
        return len(self._indices)

    def __iter__(self):
        for i in self._indices:
            yield self.arena[i]

    def __getitem__(self, index):
        return self.arena[self._indices[index]]

    def __repr__(self):
        return f"CandidateArray(name={self.name!r}, size={len(self)})"

    @property
    def indices(self):
        """Arena indices of the candidates, in collection order."""
        return tuple(self._indices)

    def append(self, candidate):
        """Appends one candidate of the arena to the collection."""
        assert self.arena[candidate.id] is candidate, (
            "Can only add candidates which belong to the collection arena."
        )
        self._indices.append(candidate.id)

    def extend(self, candidates):
        """Appends several candidates of the arena to the collection."""
        for candidate in candidates:
            self.append(candidate)

    def first(self):
        """Returns the first candidate of the collection, or `None`."""
        if not self._indices:
            return None

        return self.arena[self._indices[0]]

    def sorted(self):
        """Returns a new view of the collection in native candidate order.

        The sort is stable: candidates which compare equal keep their
        relative order. The collection itself is left untouched.

        Returns
        -------
        CandidateArray
            Sorted view sharing the same arena
        """
        order = sorted(self._indices, key=lambda i: self.arena[i].sort_key())

        return CandidateArray(self.name, self.arena, order)

    def sort(self):
        """Sorts the collection in place in native candidate order (stable).

        Every other consumer of this collection observes the new order.
        """
        self._indices.sort(key=lambda i: self.arena[i].sort_key())

    def clear(self):
        """Empties the collection."""
        self._indices.clear()


class EventStore:
    """Holds the candidate arena and the named collections of an event.

    Collection handles are created once and stay valid across events: only
    their content is cleared between events.
    """

    def __init__(self):
        """Initialize an empty store."""
        self.arena = CandidateArena()
        self._arrays = OrderedDict()

    def __contains__(self, name):
        return name in self._arrays

    def keys(self):
        """Names of the published collections."""
        return self._arrays.keys()

    def new_candidate(self, **kwargs):
        """Creates a candidate in the event arena (see
        :meth:`CandidateArena.new_candidate`).
        """
        return self.arena.new_candidate(**kwargs)

    def export_array(self, name):
        """Creates (or fetches) the collection published under a name.

        Parameters
        ----------
        name : str
            Name of the collection

        Returns
        -------
        CandidateArray
            Live collection handle
        """
        if name not in self._arrays:
            self._arrays[name] = CandidateArray(name, self.arena)

        return self._arrays[name]

    def import_array(self, name):
        """Resolves the name of an existing collection to its live handle.

        Parameters
        ----------
        name : str
            Name of the collection

        Returns
        -------
        CandidateArray
            Live collection handle

        Raises
        ------
        KeyError
            If no collection was published under this name
        """
        if name not in self._arrays:
            raise KeyError(
                f"No candidate collection published under the name `{name}`. "
                f"Available collections: {list(self._arrays.keys())}"
            )

        return self._arrays[name]

    def clear(self):
        """Drops the candidates of the current event, keeps the handles."""
        self.arena.clear()
        for array in self._arrays.values():
            array.clear()
