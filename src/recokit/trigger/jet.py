"""Generator-level filter on the transverse momentum of jets."""

from typing import List, Sequence

import numpy as np

from recokit.data import GenParticle, Jet
from recokit.math.cluster import antikt
from recokit.utils.globals import INVISIBLE_PDG_RANGE, JET_RADIUS, TRIGGER_ETA_MAX

from .base import TriggerBase

__all__ = ["JetTrigger"]


class JetTrigger(TriggerBase):
    """Accepts events with at least one central jet above a threshold.

    Jets are built with the anti-kt algorithm from the visible final-state
    particles of the event (neutrinos and other PDG codes 12-18 excluded).

    A record whose generator events all contain such a jet is counted once in
    `n_good`, not once per event.
    """

    # Name of the trigger (as specified in the configuration)
    name = "jet_trigger"

    def __init__(
        self,
        threshold: float = 0.0,
        radius: float = JET_RADIUS,
        eta_max: float = TRIGGER_ETA_MAX,
        **kwargs,
    ):
        """Initialize the jet trigger.

        Parameters
        ----------
        threshold : float, default 0.
            Jet transverse momentum threshold (GeV). If zero, every event
            passes.
        radius : float, default 0.4
            Anti-kt jet radius
        eta_max : float, default 1.1
            Maximum absolute pseudorapidity of the jets to consider
        **kwargs : dict, optional
            Event counting parameters passed to :class:`TriggerBase`
        """
        super().__init__(threshold, **kwargs)
        self.radius = radius
        self.eta_max = eta_max

    @staticmethod
    def is_visible(particle: GenParticle) -> bool:
        """Whether a particle is a visible final-state particle."""
        low, high = INVISIBLE_PDG_RANGE
        return particle.is_stable and not low <= abs(particle.pdg_code) <= high

    def find_jets(self, particles: Sequence[GenParticle]) -> List[Jet]:
        """Clusters the visible final-state particles into jets.

        Parameters
        ----------
        particles : Sequence[GenParticle]
            Particles of the generator event

        Returns
        -------
        List[Jet]
            Inclusive anti-kt jets
        """
        momenta = [p.momentum for p in particles if self.is_visible(p)]
        if not len(momenta):
            return []

        jets = antikt(np.vstack(momenta).astype(np.float64), self.radius)

        return [Jet(momentum=p) for p in jets]

    def jets_above_threshold(self, jets: Sequence[Jet]) -> int:
        """Counts the central jets with a transverse momentum above threshold."""
        return sum(
            1 for j in jets if abs(j.eta) <= self.eta_max and j.pt > self.threshold
        )

    def is_good_event(self, particles: Sequence[GenParticle]) -> bool:
        """Checks that the event contains at least one jet above threshold."""
        if self.threshold == 0:
            return True

        return self.jets_above_threshold(self.find_jets(particles)) > 0
