"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import logging

import numpy as np
import pytest

from recokit.data import TrackHit
from recokit.geo import MVTXLayerGeometry, TPCDetector, geo_factory
from recokit.utils.enums import DetectorRegionEnum
from recokit.utils.logger import logger


def pytest_addoption(parser):
    """Defines testing command line arguments that can be passed to any
    test scripts inside the general test directory.
    """
    # Optional command line argument to specify one or several detectors
    parser.addoption(
        "--detector",
        type=str,
        nargs="+",
        action="store",
        default=["sphenix"],
        help="Detector geometry name (default: sphenix)",
    )


def pytest_generate_tests(metafunc):
    """Appends general parameters to all tests."""
    # If a test requires the fixture detector, use the command line option.
    if "detector" in metafunc.fixturenames:
        metafunc.parametrize("detector", metafunc.config.getoption("--detector"))


@pytest.fixture(name="geo")
def fixture_geo():
    """Nominal detector geometry shipped with the package."""
    return geo_factory("sphenix")


@pytest.fixture(name="tpc")
def fixture_tpc():
    """Default TPC layer radius table."""
    return TPCDetector()


@pytest.fixture(name="layer_geo")
def fixture_layer_geo():
    """Geometry of an innermost MVTX layer with default frame offsets."""
    return MVTXLayerGeometry(
        layer=0, n_staves=12, radius=2.461, phi_step=2 * np.pi / 12, phi_tilt=0.304
    )


def circle_point(r, center_y):
    """Point at radius `r` on a circle of radius `center_y` centered on
    (0, `center_y`), on the positive x side.

    Parameters
    ----------
    r : float
        Transverse radius of the point
    center_y : float
        Position of the circle center along y (also its radius)

    Returns
    -------
    Tuple[float, float]
        (x, y) coordinates of the point
    """
    y = r * r / (2.0 * center_y)
    return np.sqrt(r * r - y * y), y


def make_track(radii, layers, center_y=120.0, slope=0.5, intercept=1.0):
    """Builds TPC hits of a track going through the origin.

    Parameters
    ----------
    radii : List[float]
        Transverse radius of each hit
    layers : List[int]
        Layer of each hit
    center_y : float, default 120.
        Radius of the transverse circle, centered on (0, `center_y`)
    slope : float, default 0.5
        Slope of the longitudinal line z = slope * r + intercept
    intercept : float, default 1.0
        Intercept of the longitudinal line

    Returns
    -------
    List[TrackHit]
        One hit per radius
    """
    hits = []
    for i, (r, layer) in enumerate(zip(radii, layers)):
        x, y = circle_point(r, center_y)
        hits.append(
            TrackHit(
                key=1000 + i,
                layer=layer,
                position=np.array([x, y, slope * r + intercept]),
                region=DetectorRegionEnum.RADIAL_SEGMENTED,
            )
        )

    return hits


@pytest.fixture(name="circle_point")
def fixture_circle_point():
    """Function which places points on a circle through the origin."""
    return circle_point


@pytest.fixture(name="make_track")
def fixture_make_track():
    """Function which builds the TPC hits of a track."""
    return make_track


@pytest.fixture(name="quiet_logger")
def fixture_quiet_logger():
    """Package logger restored to its default level around a test."""
    logger.setLevel(logging.NOTSET)
    yield logger
    logger.setLevel(logging.NOTSET)
