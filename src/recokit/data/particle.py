"""Module with a data class object which represents a generator particle."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .base import DataBase

__all__ = ["GenParticle"]


@dataclass(eq=False)
class GenParticle(DataBase):
    """Generator-level particle, as found in an event record.

    Attributes
    ----------
    id : int
        Index of the particle in the event record
    pdg_code : int
        PDG code of the particle
    status : int
        Generator status code (1 for final-state particles)
    momentum : np.ndarray
        (4) Four-momentum as (px, py, pz, E) in GeV
    has_end_vertex : bool
        Whether the particle decays or interacts inside the event record
    parent_pdg_codes : List[int]
        PDG codes of the particles it was produced by (empty if unknown)
    """

    id: int = -1
    pdg_code: int = 0
    status: int = 1
    momentum: np.ndarray = None
    has_end_vertex: bool = False
    parent_pdg_codes: List[int] = field(default_factory=list)

    # Attributes specifying vector components
    _vec_attrs = ("momentum",)

    def __post_init__(self):
        """Provides a default four-momentum and checks its shape."""
        if self.momentum is None:
            self.momentum = np.zeros(4)
        super().__post_init__()
        assert self.momentum.shape == (4,), (
            f"Particle momentum must be a 4-vector, got shape {self.momentum.shape}."
        )

    @property
    def is_stable(self) -> bool:
        """Whether the particle is a final-state particle."""
        return self.status == 1 and not self.has_end_vertex

    def has_parent(self, pdg_codes) -> bool:
        """Whether one of the parents matches one of the PDG codes, ignoring
        the sign of the codes."""
        species = {abs(pdg_code) for pdg_code in pdg_codes}
        return any(abs(parent) in species for parent in self.parent_pdg_codes)

    @property
    def pt(self) -> float:
        """Transverse momentum."""
        return float(np.hypot(self.momentum[0], self.momentum[1]))

    @property
    def p(self) -> float:
        """Total momentum."""
        return float(np.linalg.norm(self.momentum[:3]))

    @property
    def pz(self) -> float:
        """Longitudinal momentum."""
        return float(self.momentum[2])

    @property
    def eta(self) -> float:
        """Pseudorapidity. Particles along the beam axis have infinite eta."""
        return pseudorapidity(self.momentum)

    @property
    def rapidity(self) -> float:
        """Rapidity. Massless particles along the beam axis have infinite
        rapidity."""
        e, pz = self.momentum[3], self.momentum[2]
        if e <= abs(pz):
            return float(np.sign(pz) * np.inf) if pz != 0.0 else 0.0

        return float(0.5 * np.log((e + pz) / (e - pz)))

    @property
    def phi(self) -> float:
        """Azimuthal angle in [-pi, pi]."""
        return float(np.arctan2(self.momentum[1], self.momentum[0]))


def pseudorapidity(momentum: np.ndarray) -> float:
    """Computes the pseudorapidity of a momentum vector.

    Parameters
    ----------
    momentum : np.ndarray
        (3+) Momentum vector, only the first three components are used

    Returns
    -------
    float
        Pseudorapidity
    """
    pt = np.hypot(momentum[0], momentum[1])
    if pt == 0.0:
        return float(np.sign(momentum[2]) * np.inf) if momentum[2] != 0.0 else 0.0

    return float(np.arcsinh(momentum[2] / pt))
