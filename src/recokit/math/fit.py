"""Numba JIT compiled implementation of track fitting primitives.

All routines follow the same failure convention: when the geometry is
degenerate, the returned parameters are set to NaN instead of raising. This
keeps the per-hit loops of the callers free of exception handling.
"""

import math

import numba as nb
import numpy as np

__all__ = ["circle_fit_taubin", "line_fit", "circle_circle_intersection"]


@nb.njit(cache=True)
def circle_fit_taubin(
    x: nb.float64[:], y: nb.float64[:]
) -> (nb.float64, nb.float64, nb.float64):
    """Fits a circle to a set of 2D points using the Taubin algebraic fit.

    The fit minimizes the algebraic distance normalized by the gradient,
    solved with Newton iterations on the characteristic polynomial starting
    from zero (N. Chernov, "Circular and linear regression", 2010).

    Parameters
    ----------
    x : np.ndarray
        (N) Point coordinates along x
    y : np.ndarray
        (N) Point coordinates along y

    Returns
    -------
    float
        Radius of the fitted circle
    float
        Center of the fitted circle along x
    float
        Center of the fitted circle along y

    Notes
    -----
    Returns NaN parameters if fewer than 3 points are provided or if the
    points are collinear.
    """
    n = len(x)
    if n < 3:
        return np.nan, np.nan, np.nan

    # Compute moments w.r.t. the centroid
    mean_x = np.mean(x)
    mean_y = np.mean(y)
    mxx, myy, mxy, mxz, myz, mzz = 0.0, 0.0, 0.0, 0.0, 0.0, 0.0
    for i in range(n):
        xi = x[i] - mean_x
        yi = y[i] - mean_y
        zi = xi * xi + yi * yi
        mxy += xi * yi
        mxx += xi * xi
        myy += yi * yi
        mxz += xi * zi
        myz += yi * zi
        mzz += zi * zi

    mxx /= n
    myy /= n
    mxy /= n
    mxz /= n
    myz /= n
    mzz /= n

    # Coefficients of the characteristic polynomial
    mz = mxx + myy
    cov_xy = mxx * myy - mxy * mxy
    var_z = mzz - mz * mz
    a3 = 4.0 * mz
    a2 = -3.0 * mz * mz - mzz
    a1 = var_z * mz + 4.0 * cov_xy * mz - mxz * mxz - myz * myz
    a0 = mxz * (mxz * myy - myz * mxy) + myz * (myz * mxx - mxz * mxy) - var_z * cov_xy
    a22 = a2 + a2
    a33 = a3 + a3 + a3

    # Newton's method, starting at x = 0
    xr, yr = 0.0, a0
    for _ in range(99):
        dy = a1 + xr * (a22 + a33 * xr)
        if dy == 0.0:
            break
        xnew = xr - yr / dy
        if xnew == xr or not np.isfinite(xnew):
            break
        ynew = a0 + xnew * (a1 + xnew * (a2 + xnew * a3))
        if abs(ynew) >= abs(yr):
            break
        xr, yr = xnew, ynew

    # Circle parameters
    det = xr * xr - xr * mz + cov_xy
    if det == 0.0:
        return np.nan, np.nan, np.nan

    xc = (mxz * (myy - xr) - myz * mxy) / det / 2.0
    yc = (myz * (mxx - xr) - mxz * mxy) / det / 2.0

    return math.sqrt(xc * xc + yc * yc + mz), xc + mean_x, yc + mean_y


@nb.njit(cache=True)
def line_fit(r: nb.float64[:], z: nb.float64[:]) -> (nb.float64, nb.float64):
    """Least-squares fit of a straight line `z = a * r + b`.

    Parameters
    ----------
    r : np.ndarray
        (N) Abscissa (typically the transverse radius of each point)
    z : np.ndarray
        (N) Ordinate (typically the longitudinal coordinate of each point)

    Returns
    -------
    float
        Slope `a` of the line
    float
        Intercept `b` of the line

    Notes
    -----
    If all the abscissa values are identical, the slope is undefined. In that
    case a flat line through the mean ordinate is returned.
    """
    n = len(r)
    sum_r, sum_z, sum_rr, sum_rz = 0.0, 0.0, 0.0, 0.0
    for i in range(n):
        sum_r += r[i]
        sum_z += z[i]
        sum_rr += r[i] * r[i]
        sum_rz += r[i] * z[i]

    denom = n * sum_rr - sum_r * sum_r
    if denom == 0.0:
        return 0.0, sum_z / n

    a = (n * sum_rz - sum_r * sum_z) / denom
    b = (sum_z - a * sum_r) / n

    return a, b


@nb.njit(cache=True)
def circle_circle_intersection(
    r: nb.float64, radius: nb.float64, x0: nb.float64, y0: nb.float64
) -> (nb.float64, nb.float64, nb.float64, nb.float64):
    """Intersects a circle centered at the origin with an arbitrary circle.

    The two solutions are placed symmetrically about the line joining the two
    circle centers. The `+` solution is the one with the larger x, or the
    larger y when both share the same x. Tangent circles return the same
    point twice.

    Parameters
    ----------
    r : float
        Radius of the circle centered at the origin
    radius : float
        Radius of the second circle
    x0 : float
        Center of the second circle along x
    y0 : float
        Center of the second circle along y

    Returns
    -------
    float
        `+` solution along x
    float
        `+` solution along y
    float
        `-` solution along x
    float
        `-` solution along y

    Notes
    -----
    All four values are NaN if the circles do not intersect, if they are
    concentric or if any of the inputs is not finite.
    """
    d = math.sqrt(x0 * x0 + y0 * y0)
    if not np.isfinite(d) or not np.isfinite(r) or not np.isfinite(radius) or d == 0.0:
        return np.nan, np.nan, np.nan, np.nan

    # Distance from the origin to the chord, along the line of centers
    a = (r * r - radius * radius + d * d) / (2.0 * d)
    h2 = r * r - a * a
    if h2 < 0.0:
        return np.nan, np.nan, np.nan, np.nan

    h = math.sqrt(h2)
    ux, uy = x0 / d, y0 / d
    xm, ym = a * ux, a * uy
    x1, y1 = xm - h * uy, ym + h * ux
    x2, y2 = xm + h * uy, ym - h * ux
    if x2 > x1 or (x2 == x1 and y2 > y1):
        return x2, y2, x1, y1

    return x1, y1, x2, y2
