"""Converters of candidate collections into output records.

Each converter handles one category of physics object and is selected by the
name of its output record class in the configuration:

- `particle`: Generator-level particles and vertices
- `track`: Reconstructed tracks
- `calo`: Calorimeter towers
- `lepton`: Isolated photons, electrons and muons
- `jet`: Jets and their flavour-tagging substructure
- `event`: Missing energy, scalar HT, pile-up density and event weight
- `forward`: Forward detector hits
"""

from .calo import *
from .event import *
from .forward import *
from .jet import *
from .lepton import *
from .particle import *
from .track import *
from .factories import *
