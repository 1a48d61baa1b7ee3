"""Output tree writers.

- `memory`: :class:`MemoryTree`, keeps the filled events in memory
- `hdf5`: :class:`HDF5Tree`, persists the filled events to an HDF5 file
"""

from .hdf5 import *
from .memory import *
