"""Module which contains enumerated variables shared across the project."""

from enum import IntEnum

__all__ = ["DetectorRegionEnum", "TrkrIdEnum"]


class DetectorRegionEnum(IntEnum):
    """Enumerates the detector region types a hit can belong to."""

    OTHER = 0
    RADIAL_SEGMENTED = 1


class TrkrIdEnum(IntEnum):
    """Enumerates the tracking subsystems encoded in hitset keys."""

    MVTX = 1
    INTT = 2
    TPC = 3
    MICROMEGAS = 4
