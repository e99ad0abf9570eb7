"""Module with data structures exchanged between reconstruction algorithms.

- :class:`TrackHit` a single measurement attached to a track
- :class:`GenParticle` a generator-level particle
- :class:`Jet` a clustered jet
"""

from .hit import TrackHit
from .jet import Jet
from .particle import GenParticle
