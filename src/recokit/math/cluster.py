"""Numba JIT compiled implementation of jet clustering routines."""

import math

import numba as nb
import numpy as np

__all__ = ["antikt", "kinematics"]

# Rapidity assigned to massless objects travelling along the beam axis
MAX_RAPIDITY = 1e5


@nb.njit(cache=True)
def kinematics(p: nb.float64[:]) -> (nb.float64, nb.float64, nb.float64):
    """Computes the clustering variables of a four-momentum.

    Parameters
    ----------
    p : np.ndarray
        (4) Four-momentum as (px, py, pz, E)

    Returns
    -------
    float
        Inverse of the squared transverse momentum (inf if it vanishes)
    float
        Rapidity
    float
        Azimuthal angle in [0, 2pi)
    """
    px, py, pz, e = p[0], p[1], p[2], p[3]
    kt2 = px * px + py * py
    inv_kt2 = 1.0 / kt2 if kt2 > 0.0 else np.inf

    # Azimuth
    phi = math.atan2(py, px) if kt2 > 0.0 else 0.0
    if phi < 0.0:
        phi += 2.0 * math.pi
    if phi >= 2.0 * math.pi:
        phi -= 2.0 * math.pi

    # Rapidity, computed in a numerically stable way
    m2 = max(0.0, e * e - kt2 - pz * pz)
    e_plus_pz = e + abs(pz)
    if kt2 + m2 == 0.0 or e_plus_pz <= 0.0:
        rap = MAX_RAPIDITY if pz >= 0.0 else -MAX_RAPIDITY
    else:
        rap = 0.5 * math.log((kt2 + m2) / (e_plus_pz * e_plus_pz))
        if pz > 0.0:
            rap = -rap

    return inv_kt2, rap, phi


@nb.njit(cache=True)
def antikt(momenta: nb.float64[:, :], radius: nb.float64 = 0.4) -> nb.float64[:, :]:
    """Runs the anti-kt sequential recombination algorithm.

    Uses the E-scheme (four-momentum addition) and returns all inclusive jets,
    without any transverse momentum requirement.

    Parameters
    ----------
    momenta : np.ndarray
        (N, 4) Four-momenta of the input objects as (px, py, pz, E)
    radius : float, default 0.4
        Jet radius parameter

    Returns
    -------
    np.ndarray
        (J, 4) Four-momenta of the inclusive jets, in order of formation
    """
    n = len(momenta)
    p = momenta.copy()
    active = np.ones(n, dtype=np.bool_)
    inv_kt2 = np.empty(n, dtype=np.float64)
    rap = np.empty(n, dtype=np.float64)
    phi = np.empty(n, dtype=np.float64)
    for i in range(n):
        ikt2, y, az = kinematics(p[i])
        inv_kt2[i] = ikt2
        rap[i] = y
        phi[i] = az

    jets = np.empty((n, 4), dtype=np.float64)
    n_jets = 0
    r2 = radius * radius
    for _ in range(n):
        # Find the smallest distance, beam distances included
        best, bi, bj = np.inf, -1, -1
        for i in range(n):
            if not active[i]:
                continue
            if bi < 0 or inv_kt2[i] < best:
                best, bi, bj = inv_kt2[i], i, -1
            for j in range(i + 1, n):
                if not active[j]:
                    continue
                drap = rap[i] - rap[j]
                dphi = abs(phi[i] - phi[j])
                if dphi > math.pi:
                    dphi = 2.0 * math.pi - dphi
                dij = min(inv_kt2[i], inv_kt2[j]) * (drap * drap + dphi * dphi) / r2
                if dij < best:
                    best, bi, bj = dij, i, j

        if bj < 0:
            # Closest to the beam, promote to jet
            jets[n_jets] = p[bi]
            n_jets += 1
            active[bi] = False
        else:
            # Merge j into i
            p[bi] += p[bj]
            active[bj] = False
            ikt2, y, az = kinematics(p[bi])
            inv_kt2[bi] = ikt2
            rap[bi] = y
            phi[bi] = az

    return jets[:n_jets]
