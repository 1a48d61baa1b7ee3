"""Input model of the conversion engine.

Candidates are generic physics objects produced by upstream simulation and
reconstruction modules. They live in an event-scope arena and are published
in named collections:

- `candidate`: The :class:`Candidate` data class
- `arena`: :class:`CandidateArena`, :class:`CandidateArray` and
  :class:`EventStore`
- `flavor`: Flavour-tagging inputs attached to jet candidates

**Example Usage:**
```python
from flattree.candidate import EventStore

store = EventStore()
particles = store.export_array("Delphes/allParticles")
particles.append(store.new_candidate(pid=13, momentum=[10.0, 0.0, 5.0, 11.2]))
```
"""

from .arena import *
from .candidate import *
from .flavor import *
