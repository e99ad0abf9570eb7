"""ALPIDE pixel chip segmentation.

The chip-local frame has its x axis along the pixel rows and its z axis along
the pixel columns. Row 0 sits at the top edge of the active matrix (largest
local x), column 0 at its left edge (smallest local z). All lengths in cm.
"""

from dataclasses import dataclass
from typing import Tuple

from recokit.utils.globals import (
    ALPIDE_N_COLS,
    ALPIDE_N_ROWS,
    ALPIDE_PASSIVE_EDGE_READOUT,
    ALPIDE_PASSIVE_EDGE_SIDE,
    ALPIDE_PASSIVE_EDGE_TOP,
    ALPIDE_PITCH_COL,
    ALPIDE_PITCH_ROW,
    ALPIDE_SENSOR_THICKNESS,
)

__all__ = ["SegmentationAlpide"]


@dataclass(frozen=True)
class SegmentationAlpide:
    """Pixel segmentation of an ALPIDE chip.

    Attributes
    ----------
    n_rows : int
        Number of pixel rows (along local x)
    n_cols : int
        Number of pixel columns (along local z)
    pitch_row : float
        Pixel pitch along the rows
    pitch_col : float
        Pixel pitch along the columns
    sensor_thickness : float
        Thickness of the sensitive layer
    passive_edge_readout : float
        Width of the passive edge on the readout side (bottom)
    passive_edge_top : float
        Width of the passive edge on the top side
    passive_edge_side : float
        Width of the passive edges on the left and right sides
    """

    n_rows: int = ALPIDE_N_ROWS
    n_cols: int = ALPIDE_N_COLS
    pitch_row: float = ALPIDE_PITCH_ROW
    pitch_col: float = ALPIDE_PITCH_COL
    sensor_thickness: float = ALPIDE_SENSOR_THICKNESS
    passive_edge_readout: float = ALPIDE_PASSIVE_EDGE_READOUT
    passive_edge_top: float = ALPIDE_PASSIVE_EDGE_TOP
    passive_edge_side: float = ALPIDE_PASSIVE_EDGE_SIDE

    @property
    def num_pixels(self) -> int:
        """Total number of pixels in the active matrix."""
        return self.n_rows * self.n_cols

    @property
    def active_size_rows(self) -> float:
        """Size of the active matrix along local x."""
        return self.pitch_row * self.n_rows

    @property
    def active_size_cols(self) -> float:
        """Size of the active matrix along local z."""
        return self.pitch_col * self.n_cols

    @property
    def sensor_size_rows(self) -> float:
        """Size of the full sensor along local x, passive edges included."""
        return self.active_size_rows + self.passive_edge_top + self.passive_edge_readout

    @property
    def sensor_size_cols(self) -> float:
        """Size of the full sensor along local z, passive edges included."""
        return self.active_size_cols + 2 * self.passive_edge_side

    @property
    def _row_origin(self) -> float:
        """Local x of the top edge of the active matrix."""
        return 0.5 * (
            self.active_size_rows - self.passive_edge_top + self.passive_edge_readout
        )

    def local_to_detector_unchecked(self, x_row: float, z_col: float) -> Tuple[int, int]:
        """Converts chip-local coordinates to pixel indices, without checks.

        Points outside the active matrix yield indices outside of the valid
        range (negative below the first row/column).

        Parameters
        ----------
        x_row : float
            Chip-local coordinate along the rows
        z_col : float
            Chip-local coordinate along the columns

        Returns
        -------
        int
            Row index
        int
            Column index
        """
        x = self._row_origin - x_row
        z = z_col + 0.5 * self.active_size_cols
        row = int(x / self.pitch_row)
        col = int(z / self.pitch_col)
        if x < 0:
            row -= 1
        if z < 0:
            col -= 1

        return row, col

    def local_to_detector(self, x_row: float, z_col: float) -> Tuple[int, int, bool]:
        """Converts chip-local coordinates to pixel indices.

        Parameters
        ----------
        x_row : float
            Chip-local coordinate along the rows
        z_col : float
            Chip-local coordinate along the columns

        Returns
        -------
        int
            Row index (-1 if outside of the active matrix)
        int
            Column index (-1 if outside of the active matrix)
        bool
            `True` if the point is inside the active matrix
        """
        x = self._row_origin - x_row
        z = z_col + 0.5 * self.active_size_cols
        if x < 0 or x >= self.active_size_rows or z < 0 or z >= self.active_size_cols:
            return -1, -1, False

        row = min(int(x / self.pitch_row), self.n_rows - 1)
        col = min(int(z / self.pitch_col), self.n_cols - 1)

        return row, col, True

    def detector_to_local_unchecked(self, row: int, col: int) -> Tuple[float, float]:
        """Converts pixel indices to the chip-local coordinates of the pixel
        center, without range checks.

        Parameters
        ----------
        row : int
            Row index
        col : int
            Column index

        Returns
        -------
        float
            Chip-local coordinate along the rows
        float
            Chip-local coordinate along the columns
        """
        x_row = self._row_origin - (row + 0.5) * self.pitch_row
        z_col = (col + 0.5) * self.pitch_col - 0.5 * self.active_size_cols

        return x_row, z_col

    def detector_to_local(self, row: int, col: int) -> Tuple[float, float, bool]:
        """Converts pixel indices to the chip-local coordinates of the pixel
        center.

        The coordinates are computed even if the indices are out of range so
        that the caller always receives a value, which must then be checked
        against the returned flag.

        Parameters
        ----------
        row : int
            Row index
        col : int
            Column index

        Returns
        -------
        float
            Chip-local coordinate along the rows
        float
            Chip-local coordinate along the columns
        bool
            `True` if the indices are within the pixel grid
        """
        valid = 0 <= row < self.n_rows and 0 <= col < self.n_cols
        x_row, z_col = self.detector_to_local_unchecked(row, col)

        return x_row, z_col, valid

    def describe(self) -> str:
        """Summarizes the chip segmentation in a human-readable form.

        Returns
        -------
        str
            Pixel size, passive edges and active/total sizes of the chip
        """
        return (
            f"Pixel size: {self.pitch_row * 1e4:.2f} (along {self.n_rows} rows) "
            f"{self.pitch_col * 1e4:.2f} (along {self.n_cols} columns) microns\n"
            f"Passive edges: bottom: {self.passive_edge_readout * 1e4:.2f}, "
            f"top: {self.passive_edge_top * 1e4:.2f}, "
            f"left/right: {self.passive_edge_side * 1e4:.2f} microns\n"
            f"Active/Total size: {self.active_size_rows:.6f}/{self.sensor_size_rows:.6f} "
            f"(rows) {self.active_size_cols:.6f}/{self.sensor_size_cols:.6f} (cols) cm"
        )
