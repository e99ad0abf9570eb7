"""Generator-level event filters.

- :class:`ParticleTrigger` accepts events which contain at least one particle
  of each requested species within kinematic cuts
- :class:`JetTrigger` accepts events which contain a central anti-kt jet above
  a transverse momentum threshold
"""

from .factories import trigger_factory
from .jet import JetTrigger
from .particle import ParticleTrigger
