"""Generator-level filter on the kinematics of identified particles."""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from recokit.data import GenParticle
from recokit.utils.globals import TRIGGER_ETA_MAX

from .base import TriggerBase

__all__ = ["ParticleTrigger"]


class ParticleTrigger(TriggerBase):
    """Accepts events with at least one particle of each requested species
    passing a set of kinematic cuts.

    Each kinematic variable (eta, |eta|, pt, p and pz) has an independent
    lower and upper bound. A bound set to `None` is not applied. Bounds are
    inclusive. Species are identified by the absolute value of their PDG code.

    If parent species are requested, a particle only counts when it was
    produced by one of them.
    """

    # Name of the trigger (as specified in the configuration)
    name = "particle_trigger"

    # Kinematic variables which can be cut on
    _variables = ("eta", "abs_eta", "pt", "p", "pz")

    def __init__(
        self,
        threshold: float = 0.0,
        particles: Optional[Iterable[int]] = None,
        parents: Optional[Iterable[int]] = None,
        stable_only: bool = True,
        eta_low: Optional[float] = -TRIGGER_ETA_MAX,
        eta_high: Optional[float] = TRIGGER_ETA_MAX,
        abs_eta_low: Optional[float] = None,
        abs_eta_high: Optional[float] = None,
        pt_low: Optional[float] = None,
        pt_high: Optional[float] = None,
        p_low: Optional[float] = None,
        p_high: Optional[float] = None,
        pz_low: Optional[float] = None,
        pz_high: Optional[float] = None,
        **kwargs,
    ):
        """Initialize the particle trigger.

        Parameters
        ----------
        threshold : float, default 0.
            If nonzero, and `pt_low` is not provided, used as the lower bound
            of the transverse momentum (GeV)
        particles : Iterable[int], optional
            PDG codes of the particle species which must be present
        parents : Iterable[int], optional
            PDG codes of the species a counted particle must be produced by
        stable_only : bool, default True
            Only consider final-state particles
        eta_low, eta_high : float, optional
            Bounds on the pseudorapidity (default [-1.1, 1.1])
        abs_eta_low, abs_eta_high : float, optional
            Bounds on the absolute pseudorapidity
        pt_low, pt_high : float, optional
            Bounds on the transverse momentum (GeV)
        p_low, p_high : float, optional
            Bounds on the total momentum (GeV)
        pz_low, pz_high : float, optional
            Bounds on the longitudinal momentum (GeV)
        **kwargs : dict, optional
            Event counting parameters passed to :class:`TriggerBase`
        """
        super().__init__(threshold, **kwargs)

        if threshold != 0 and pt_low is None:
            pt_low = threshold

        self.stable_only = stable_only
        self.particles = []
        if particles is not None:
            self.add_particles(particles)

        self.parents = []
        if parents is not None:
            self.add_parents(parents)

        self.cuts = {}
        bounds = {
            "eta": (eta_low, eta_high),
            "abs_eta": (abs_eta_low, abs_eta_high),
            "pt": (pt_low, pt_high),
            "p": (p_low, p_high),
            "pz": (pz_low, pz_high),
        }
        for var, (low, high) in bounds.items():
            self.set_cut(var, low, high)

    def add_particle(self, pdg_code: int):
        """Adds a particle species to the list of required species."""
        self.particles.append(int(pdg_code))

    def add_particles(self, pdg_codes: Iterable[int]):
        """Adds several particle species to the list of required species."""
        for pdg_code in pdg_codes:
            self.add_particle(pdg_code)

    def add_parent(self, pdg_code: int):
        """Adds a species to the list of accepted parent species."""
        self.parents.append(int(pdg_code))

    def add_parents(self, pdg_codes: Iterable[int]):
        """Adds several species to the list of accepted parent species."""
        for pdg_code in pdg_codes:
            self.add_parent(pdg_code)

    def set_cut(
        self, variable: str, low: Optional[float] = None, high: Optional[float] = None
    ):
        """Sets the bounds of a kinematic cut.

        Parameters
        ----------
        variable : str
            One of 'eta', 'abs_eta', 'pt', 'p' or 'pz'
        low : float, optional
            Lower bound. If `None`, no lower bound is applied.
        high : float, optional
            Upper bound. If `None`, no upper bound is applied.
        """
        if variable not in self._variables:
            raise ValueError(
                f"Kinematic variable not recognized: {variable}. Must be one "
                f"of {self._variables}."
            )

        self.cuts[variable] = (low, high)

    def set_cut_low(self, variable: str, low: float):
        """Sets the lower bound of a kinematic cut, keeping the upper one."""
        self.set_cut(variable, low, self.cuts[variable][1])

    def set_cut_high(self, variable: str, high: float):
        """Sets the upper bound of a kinematic cut, keeping the lower one."""
        self.set_cut(variable, self.cuts[variable][0], high)

    @staticmethod
    def kinematics(particle: GenParticle) -> Dict[str, float]:
        """Computes the kinematic variables a particle can be cut on."""
        eta = particle.eta
        return {
            "eta": eta,
            "abs_eta": abs(eta),
            "pt": particle.pt,
            "p": particle.p,
            "pz": particle.pz,
        }

    def passes_cuts(self, particle: GenParticle) -> bool:
        """Checks whether a particle passes the parent requirement and all
        the kinematic cuts.

        Parameters
        ----------
        particle : GenParticle
            Particle to check

        Returns
        -------
        bool
            `True` if the particle passes all the cuts
        """
        if self.stable_only and not particle.is_stable:
            return False
        if self.parents and not particle.has_parent(self.parents):
            return False

        values = self.kinematics(particle)
        for var, (low, high) in self.cuts.items():
            if low is not None and values[var] < low:
                return False
            if high is not None and values[var] > high:
                return False

        return True

    def count_particles(self, particles: Sequence[GenParticle]) -> Dict[int, int]:
        """Counts the particles passing the cuts, per absolute PDG code."""
        return Counter(abs(p.pdg_code) for p in particles if self.passes_cuts(p))

    def particle_counts(self, particles: Sequence[GenParticle]) -> List[int]:
        """Number of particles passing the cuts for each required species.

        Parameters
        ----------
        particles : Sequence[GenParticle]
            Particles of the generator event

        Returns
        -------
        List[int]
            One count per required species, in the order they were added
        """
        counts = self.count_particles(particles)

        return [counts.get(abs(pdg_code), 0) for pdg_code in self.particles]

    def is_good_event(self, particles: Sequence[GenParticle]) -> bool:
        """Checks that every required species is present within the cuts."""
        return all(count > 0 for count in self.particle_counts(particles))
