"""Fixtures shared by the trigger tests."""

import numpy as np
import pytest

from recokit.data import GenParticle


def particle(pdg_code, pt, eta=0.0, phi=0.0, status=1, mass=0.0, parents=()):
    """Builds a generator particle from its transverse kinematics.

    Parameters
    ----------
    pdg_code : int
        PDG code of the particle
    pt : float
        Transverse momentum (GeV)
    eta : float, default 0.
        Pseudorapidity
    phi : float, default 0.
        Azimuthal angle
    status : int, default 1
        Generator status code
    mass : float, default 0.
        Mass (GeV)
    parents : Sequence[int], default ()
        PDG codes of the parent particles

    Returns
    -------
    GenParticle
        Generator particle
    """
    px, py, pz = pt * np.cos(phi), pt * np.sin(phi), pt * np.sinh(eta)
    energy = np.sqrt(px**2 + py**2 + pz**2 + mass**2)

    return GenParticle(
        pdg_code=pdg_code,
        status=status,
        momentum=np.array([px, py, pz, energy]),
        parent_pdg_codes=list(parents),
    )


@pytest.fixture(name="particle")
def fixture_particle():
    """Function which builds a generator particle."""
    return particle
