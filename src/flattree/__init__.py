"""Top-level module of the flattree source code."""

# Import main workflow entry point
from .writer import TreeWriter
from .version import __version__

# Import commonly used data structures
from .candidate import EventStore
