"""Numerical routines shared by the converters.

- `kinematics`: Transverse, angular and time quantities of four-vectors
"""

from .kinematics import *
