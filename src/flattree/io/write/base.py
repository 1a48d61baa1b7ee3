"""Module with the interface shared by all output tree writers."""

from collections import OrderedDict

from flattree.utils.logger import logger

__all__ = ["TreeBranch", "TreeBase"]


class TreeBranch:
    """Buffer of the records of one output branch for the current event.

    Attributes
    ----------
    name : str
        Name of the branch
    record : type
        Record class accepted by the branch
    records : List[object]
        Records appended during the current event
    """

    def __init__(self, name, record):
        """Initialize an empty branch.

        Parameters
        ----------
        name : str
            Name of the branch
        record : type
            Record class accepted by the branch
        """
        self.name = name
        self.record = record
        self.records = []

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __repr__(self):
        return (
            f"TreeBranch(name={self.name!r}, record={self.record.__name__}, "
            f"size={len(self)})"
        )

    def new_entry(self, **kwargs):
        """Creates a record, appends it to the branch and returns it.

        Parameters
        ----------
        **kwargs : dict
            Attributes of the record

        Returns
        -------
        object
            New record
        """
        record = self.record(**kwargs)
        self.records.append(record)

        return record

    def append(self, record):
        """Appends one record to the branch.

        Parameters
        ----------
        record : object
            Record of the branch record class
        """
        if not isinstance(record, self.record):
            raise TypeError(
                f"Branch `{self.name}` stores `{self.record.__name__}` "
                f"records, got `{type(record).__name__}`."
            )
        self.records.append(record)

    def clear(self):
        """Drops the records of the current event."""
        self.records = []


class TreeBase:
    """Base class of all output tree writers.

    A tree is a set of named branches, each storing records of one class.
    Converters append records to the branches during an event, `fill`
    commits the event and empties the branch buffers.
    """

    # Name of the writer (as specified in the configuration)
    name = ""

    def __init__(self):
        """Initialize an empty tree."""
        self.branches = OrderedDict()
        self.num_events = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def new_branch(self, name, record):
        """Creates a new output branch.

        If a branch already exists under this name, it is replaced.

        Parameters
        ----------
        name : str
            Name of the branch
        record : type
            Record class stored in the branch

        Returns
        -------
        TreeBranch
            Branch handle
        """
        if name in self.branches:
            logger.warning("Replacing existing output branch `%s`.", name)

        branch = TreeBranch(name, record)
        self.branches[name] = branch

        return branch

    def fill(self):
        """Commits the records of the current event, empties the branches."""
        self.store()
        self.discard()
        self.num_events += 1

    def discard(self):
        """Empties the branches without committing their records."""
        for branch in self.branches.values():
            branch.clear()

    def store(self):
        """Persists the content of the branches for the current event."""
        raise NotImplementedError("Tree writers must implement `store`.")

    def close(self):
        """Releases the resources held by the writer."""
