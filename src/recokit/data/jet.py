"""Module with a data class object which represents a jet."""

from dataclasses import dataclass

import numpy as np

from .base import DataBase
from .particle import pseudorapidity

__all__ = ["Jet"]


@dataclass(eq=False)
class Jet(DataBase):
    """Jet produced by a sequential recombination algorithm.

    Attributes
    ----------
    momentum : np.ndarray
        (4) Four-momentum as (px, py, pz, E) in GeV
    """

    momentum: np.ndarray = None

    # Attributes specifying vector components
    _vec_attrs = ("momentum",)

    def __post_init__(self):
        """Provides a default four-momentum."""
        if self.momentum is None:
            self.momentum = np.zeros(4)
        super().__post_init__()

    @property
    def pt(self) -> float:
        """Transverse momentum."""
        return float(np.hypot(self.momentum[0], self.momentum[1]))

    @property
    def eta(self) -> float:
        """Pseudorapidity."""
        return pseudorapidity(self.momentum)
