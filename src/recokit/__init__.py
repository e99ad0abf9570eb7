"""Reconstruction algorithms for a pixel vertex detector and a radially
segmented TPC, with generator-level event filters.

- `utils`: logging, configuration loading, class factories and constants
- `math`: Numba-compiled fitting and jet clustering kernels
- `data`: data structures exchanged between algorithms
- `geo`: detector geometry (TPC layer radii, MVTX layers, ALPIDE chips)
- `reco`: TPC cluster radial projection and MVTX pixel mapping
- `trigger`: generator-level particle and jet triggers
"""

from .version import __version__
