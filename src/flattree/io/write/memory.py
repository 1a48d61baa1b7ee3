"""Module to keep the output tree in memory."""

from flattree.data import ObjectList

from .base import TreeBase

__all__ = ["MemoryTree"]


class MemoryTree(TreeBase):
    """Keeps each filled event as a dictionary of record lists.

    Useful for tests and interactive use, where the records are inspected
    right away rather than persisted.

    Typical configuration should look like:

    .. code-block:: yaml

        io:
          writer:
            name: memory
    """

    name = "memory"

    def __init__(self):
        """Initialize an empty in-memory tree."""
        super().__init__()
        self.events = []

    def __len__(self):
        return len(self.events)

    def __getitem__(self, entry):
        return self.events[entry]

    def store(self):
        """Snapshots the content of each branch for the current event."""
        self.events.append(
            {
                name: ObjectList(branch.records, default=branch.record)
                for name, branch in self.branches.items()
            }
        )
