"""Moves distortion-corrected TPC clusters back to their readout surface."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from recokit.data import TrackHit
from recokit.geo import Geometry, TPCDetector
from recokit.math.fit import circle_circle_intersection, circle_fit_taubin, line_fit
from recokit.utils.globals import INTERSECTION_TOLERANCE, MIN_CIRCLE_FIT_POINTS

from .base import RecoBase

__all__ = ["ClusterRadialProjector"]


class ClusterRadialProjector(RecoBase):
    """Projects the TPC clusters of a track onto their nominal layer radius.

    The transverse trajectory of the track is described by a circle fitted to
    its TPC clusters, the longitudinal trajectory by a straight line in the
    (r, z) plane. Each TPC cluster is moved along this trajectory from its own
    radius to the nominal readout radius of its layer. Only the displacement
    along the fitted trajectory is applied, so the residual of the cluster
    w.r.t. the fit is preserved.

    Clusters from other subsystems are left untouched.
    """

    # Name of the algorithm (as specified in the configuration)
    name = "tpc_cluster_mover"

    # Alternative allowed names of the algorithm
    aliases = ("cluster_radial_projector",)

    def __init__(
        self,
        tpc: Optional[TPCDetector] = None,
        geo: Optional[Geometry] = None,
        tolerance: float = INTERSECTION_TOLERANCE,
        verbosity: int = 0,
    ):
        """Initialize the cluster mover.

        Parameters
        ----------
        tpc : TPCDetector, optional
            TPC layer radius table. Takes precedence over `geo`.
        geo : Geometry, optional
            Detector geometry from which to fetch the TPC layer radius table.
            If neither `tpc` nor `geo` is provided, the default table is used.
        tolerance : float, default 5.0
            Maximum distance along x and y (cm) between a cluster and the `+`
            intersection solution for it to be selected over the `-` one
        verbosity : int, default 0
            Verbosity level
        """
        super().__init__(verbosity)

        if tpc is None:
            tpc = geo.tpc if geo is not None else TPCDetector()
        self.tpc = tpc
        self.tolerance = tolerance

    @property
    def layer_radii(self) -> np.ndarray:
        """Nominal readout radius of each TPC layer."""
        return self.tpc.layer_radii

    def initialize_geometry(self, layer_radii: Sequence[float]):
        """Replaces the layer radius table with an external one.

        Parameters
        ----------
        layer_radii : Sequence[float]
            Radius of each TPC layer, in layer order
        """
        self.debug(1, "Initializing layer radii for TPC from cell geometry")
        assert len(layer_radii) == self.tpc.num_layers, (
            f"Expected {self.tpc.num_layers} TPC layer radii, got {len(layer_radii)}."
        )
        self.tpc = TPCDetector.from_radii(layer_radii, self.tpc.layer_offset)

    def fit(self, positions: np.ndarray) -> Tuple[float, float, float, float, float]:
        """Fits the trajectory of a set of TPC cluster positions.

        Parameters
        ----------
        positions : np.ndarray
            (N, 3) Global positions of the clusters

        Returns
        -------
        float
            Radius R of the transverse circle
        float
            Center X0 of the transverse circle
        float
            Center Y0 of the transverse circle
        float
            Slope A of the longitudinal line z = A * r + B
        float
            Intercept B of the longitudinal line z = A * r + B
        """
        positions = np.ascontiguousarray(positions, dtype=np.float64)
        x, y, z = positions[:, 0].copy(), positions[:, 1].copy(), positions[:, 2].copy()
        radius, x0, y0 = circle_fit_taubin(x, y)
        slope, intercept = line_fit(np.hypot(x, y), z)

        return radius, x0, y0, slope, intercept

    def intersect(
        self,
        target_radius: float,
        radius: float,
        x0: float,
        y0: float,
        x: float,
        y: float,
    ) -> Optional[Tuple[float, float]]:
        """Finds where the fitted circle crosses a cylinder of given radius.

        Of the two crossing points, the `+` solution is kept if it lies within
        the tolerance of the original cluster position along both x and y,
        otherwise the `-` solution is kept.

        Parameters
        ----------
        target_radius : float
            Radius of the cylinder centered on the beam axis
        radius : float
            Radius of the fitted circle
        x0 : float
            Center of the fitted circle along x
        y0 : float
            Center of the fitted circle along y
        x : float
            Original cluster position along x
        y : float
            Original cluster position along y

        Returns
        -------
        Tuple[float, float]
            Selected crossing point, or `None` if the circle does not cross
            the cylinder
        """
        xplus, yplus, xminus, yminus = circle_circle_intersection(
            target_radius, radius, x0, y0
        )
        if np.isnan(xplus):
            self.debug(
                2,
                "circle/circle intersection calculation failed, skip this "
                "cluster (target_radius %s, fitted R %s, X0 %s, Y0 %s)",
                target_radius, radius, x0, y0,
            )
            return None

        if abs(x - xplus) < self.tolerance and abs(y - yplus) < self.tolerance:
            return xplus, yplus

        return xminus, yminus

    def project(self, hits: List[TrackHit]) -> List[TrackHit]:
        """Moves the TPC clusters of one track to their readout layer radius.

        Parameters
        ----------
        hits : List[TrackHit]
            All the hits of one track, in any order

        Returns
        -------
        List[TrackHit]
            Hits of other subsystems (unchanged) followed by the moved TPC
            hits. TPC hits which cannot be projected are dropped. If the track
            has fewer than 3 TPC hits, the input list is returned as is.
        """
        # Partition the hits, non-TPC hits stay where they are
        moved, segmented = [], []
        for hit in hits:
            if hit.is_segmented:
                segmented.append(hit)
            else:
                moved.append(hit)

        # Need at least 3 clusters to fit a circle
        if len(segmented) < MIN_CIRCLE_FIT_POINTS:
            self.debug(
                1, "skip this TPC track, not enough clusters: %d", len(segmented)
            )
            return hits

        # Fit the transverse and longitudinal trajectories
        positions = np.vstack([hit.position for hit in segmented])
        radius, x0, y0, slope, intercept = self.fit(positions)

        # Move each TPC cluster to its readout layer radius
        for hit in segmented:
            x, y, z = hit.position
            target_radius = self.tpc.radius(hit.layer)
            proj = self.intersect(target_radius, radius, x0, y0, x, y)
            if proj is None:
                continue

            cluster_radius = np.hypot(x, y)
            start = self.intersect(cluster_radius, radius, x0, y0, x, y)
            if start is None:
                continue

            # The z projection is unique
            z_proj = intercept + slope * target_radius
            z_start = intercept + slope * cluster_radius

            new_position = np.array(
                [
                    x - (start[0] - proj[0]),
                    y - (start[1] - proj[1]),
                    z - (z_start - z_proj),
                ]
            )
            moved.append(hit.moved(new_position))

            self.debug(
                3,
                "Cluster %s xstart %s xproj %s ystart %s yproj %s zstart %s "
                "zproj %s\n layer %d layer radius %s cluster radius %s\n"
                "  global in %s\n  global new %s",
                hit.key, start[0], proj[0], start[1], proj[1], z_start, z_proj,
                hit.layer, target_radius, cluster_radius, hit.position,
                new_position,
            )

        return moved

    def __call__(self, hits: List[TrackHit]) -> List[TrackHit]:
        """Alias of :meth:`project`."""
        return self.project(hits)
