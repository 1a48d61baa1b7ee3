"""Output records produced by the converters.

Every record is a flat data class with a fixed schema. Records never own
other records of a different branch: relations are weak references which
hold the ID of the source candidate (`-1` when absent), resolvable with
:meth:`ObjectList.find` against the records which carry a `candidate_id`.

- `particle`: :class:`Particle`, :class:`Vertex`
- `track`: :class:`Track`
- `calo`: :class:`Tower`
- `lepton`: :class:`Photon`, :class:`Electron`, :class:`Muon`
- `jet`: :class:`Jet` and its flavour-tagging substructure records
- `event`: :class:`MissingET`, :class:`ScalarHT`, :class:`Rho`,
  :class:`Weight`
- `forward`: :class:`HectorHit`
- `list`: :class:`ObjectList`
"""

from .base import *
from .calo import *
from .event import *
from .forward import *
from .jet import *
from .lepton import *
from .list import *
from .particle import *
from .track import *
