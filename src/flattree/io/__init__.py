"""Storage of the output records.

The conversion engine only relies on the interface of
:class:`flattree.io.write.base.TreeBase`: create a branch for a record class,
append records to it, and fill the tree once per event.

**Example HDF5 Configuration:**
```yaml
io:
  writer:
    name: hdf5
    file_name: output.h5
    overwrite: true
```
"""

from .factories import *
from .write import *
