"""Maps MVTX coordinates onto sensors and pixels."""

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from recokit.geo import Geometry, MVTXLayerGeometry
from recokit.utils.globals import MVTX_EDGE_EPS
from recokit.utils.logger import logger

from .base import RecoBase

__all__ = ["SensorPixelMapper"]


def round_half_away(value: float) -> int:
    """Rounds to the nearest integer, halfway cases away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class SensorPixelMapper(RecoBase):
    """Maps coordinates of one MVTX layer onto sensors and pixels.

    Provides the mapping between:
    - global coordinates and the (stave, chip) sensor they belong to;
    - sensor-local coordinates and pixel (row, column) indices;
    - pixel (row, column) indices and linear pixel indices.

    Conversions never raise on out-of-range inputs. They return a value along
    with a validity flag (or log a warning), which the caller must check.
    """

    # Name of the algorithm (as specified in the configuration)
    name = "mvtx_pixel_mapper"

    # Alternative allowed names of the algorithm
    aliases = ("sensor_pixel_mapper",)

    def __init__(
        self,
        layer_geo: Optional[MVTXLayerGeometry] = None,
        geo: Optional[Geometry] = None,
        layer: int = 0,
        verbosity: int = 0,
    ):
        """Initialize the pixel mapper.

        Parameters
        ----------
        layer_geo : MVTXLayerGeometry, optional
            Geometry of the layer. Takes precedence over `geo`.
        geo : Geometry, optional
            Detector geometry from which to fetch the layer geometry
        layer : int, default 0
            Global index of the layer to fetch from `geo`
        verbosity : int, default 0
            Verbosity level
        """
        super().__init__(verbosity)

        if layer_geo is None:
            assert geo is not None and geo.mvtx is not None, (
                "Must provide the layer geometry or a geometry with MVTX layers."
            )
            layer_geo = geo.mvtx[layer]

        self.geo = layer_geo
        self.seg = layer_geo.segmentation

    @property
    def n_rows(self) -> int:
        """Number of pixel rows of a chip (along local x)."""
        return self.seg.n_rows

    @property
    def n_cols(self) -> int:
        """Number of pixel columns of a chip (along local z)."""
        return self.seg.n_cols

    def locate_sensor(self, world: Sequence[float]) -> Tuple[int, int]:
        """Finds the stave and chip a global point belongs to.

        The indices are not clamped to the physical range of the layer: it is
        the responsibility of the caller to check them.

        Parameters
        ----------
        world : Sequence[float]
            (3) Global coordinates of the point

        Returns
        -------
        int
            Stave index, from the azimuth of the point
        int
            Chip index, from the z coordinate of the point
        """
        phi = math.atan2(world[1], world[0])
        if phi < 0:
            phi += 2.0 * math.pi

        stave = round_half_away((phi - self.geo.phi_0) / self.geo.phi_step)
        chip = round_half_away(world[2] / self.geo.chip_pitch_z) + self.geo.central_chip

        return stave, chip

    def snap_to_edges(self, sensor_local: Sequence[float]) -> np.ndarray:
        """Pulls points lying on the active matrix edges back inside it.

        Upstream geometric transformations can leave points which sit on the
        edge of the active matrix a fraction of a micron outside of it. Points
        within `5e-6` cm of an edge along x or z are moved just inside it.

        Parameters
        ----------
        sensor_local : Sequence[float]
            (3) Sensor-local coordinates

        Returns
        -------
        np.ndarray
            (3) Adjusted sensor-local coordinates
        """
        local = np.array(sensor_local, dtype=np.float64)
        for axis, size in ((0, self.seg.active_size_rows), (2, self.seg.active_size_cols)):
            half = size / 2.0
            if abs(abs(local[axis]) - half) < MVTX_EDGE_EPS:
                local[axis] = math.copysign(half - MVTX_EDGE_EPS, local[axis])

        return local

    def local_to_pixel(self, sensor_local: Sequence[float]) -> Tuple[int, int, bool]:
        """Converts sensor-local coordinates to pixel indices.

        Parameters
        ----------
        sensor_local : Sequence[float]
            (3) Sensor-local coordinates (x along the rows, z along the
            columns)

        Returns
        -------
        int
            Row index (-1 if outside of the active matrix)
        int
            Column index (-1 if outside of the active matrix)
        bool
            `True` if the point maps onto a pixel of the active matrix
        """
        in_chip = self.snap_to_edges(sensor_local) + self.geo.sensor_in_chip

        return self.seg.local_to_detector(in_chip[0], in_chip[2])

    def local_to_index(self, sensor_local: Sequence[float]) -> int:
        """Converts sensor-local coordinates to a linear pixel index.

        Points outside of the sensor are reported and still yield an index,
        which is then outside of the valid range.

        Parameters
        ----------
        sensor_local : Sequence[float]
            (3) Sensor-local coordinates

        Returns
        -------
        int
            Linear pixel index
        """
        row, col, valid = self.local_to_pixel(sensor_local)
        if not valid:
            logger.warning(
                "Pixel is out of sensor (%s, %s, %s).", *np.asarray(sensor_local)
            )

        if row < 0 or row >= self.n_rows or col < 0 or col >= self.n_cols:
            logger.warning("Wrong pixel value row=%d and col=%d.", row, col)

        return self.linear_index(row, col)

    def pixel_to_local(self, row: int, col: int) -> np.ndarray:
        """Converts pixel indices to the sensor-local coordinates of the pixel
        center.

        Out-of-range indices are reported and still yield a (meaningless)
        position: the caller must check the indices beforehand.

        Parameters
        ----------
        row : int
            Row index
        col : int
            Column index

        Returns
        -------
        np.ndarray
            (3) Sensor-local coordinates
        """
        x_row, z_col, valid = self.seg.detector_to_local(row, col)
        if not valid:
            logger.warning("Pixel coord (%d, %d) out of range.", row, col)

        return np.array([x_row, 0.0, z_col]) - self.geo.sensor_in_chip

    def index_to_local(self, index: int) -> np.ndarray:
        """Converts a linear pixel index to sensor-local coordinates."""
        row, col = self.index_to_rowcol(index)

        return self.pixel_to_local(row, col)

    def linear_index(self, row: int, col: int) -> int:
        """Converts pixel indices to a linear pixel index.

        The row index varies fastest: `index = row + col * n_rows`.

        Parameters
        ----------
        row : int
            Row index
        col : int
            Column index

        Returns
        -------
        int
            Linear pixel index
        """
        return row + col * self.n_rows

    def index_to_rowcol(self, index: int) -> Tuple[int, int]:
        """Converts a linear pixel index to pixel indices.

        Parameters
        ----------
        index : int
            Linear pixel index

        Returns
        -------
        int
            Row index
        int
            Column index
        """
        return index % self.n_rows, index // self.n_rows

    def identify(self) -> str:
        """Summarizes the layer geometry in a single line."""
        return (
            f"{self.__class__.__name__}: layer: {self.geo.layer}, "
            f"layer_radius: {self.geo.radius}, "
            f"N_staves in layer: {self.geo.n_staves}, "
            f"pixel_x: {self.geo.pixel_x}, pixel_z: {self.geo.pixel_z}, "
            f"pixel_thickness: {self.geo.pixel_thickness}"
        )

    def __str__(self) -> str:
        """Human-readable description of the mapper."""
        return self.identify()
