"""Module with fast, Numba-accelerated, compiled math routines.

This includes multiple submodules:
- `fit.py` includes track fitting primitives (circle fit, line fit and
  circle-circle intersections)
- `cluster.py` includes jet clustering routines
"""

from . import cluster, fit
