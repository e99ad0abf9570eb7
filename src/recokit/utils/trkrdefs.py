"""Encoding and decoding of tracker hitset and cluster keys.

A hitset key is a 32-bit word which stores:
- the tracker subsystem ID in bits 24-31;
- the layer in bits 16-23;
- subsystem-specific information in the lower 16 bits.

A cluster key is a 64-bit word which stores the hitset key in its upper
32 bits and the cluster index within the hitset in its lower 32 bits.
"""

from .enums import DetectorRegionEnum, TrkrIdEnum

__all__ = [
    "gen_hitset_key",
    "gen_cluster_key",
    "get_hitset_key",
    "get_trkr_id",
    "get_layer",
    "get_cluster_id",
    "get_region",
]

TRKR_ID_SHIFT = 24
LAYER_SHIFT = 16
HITSET_SHIFT = 32

BYTE_MASK = 0xFF
WORD_MASK = 0xFFFFFFFF


def gen_hitset_key(trkr_id: int, layer: int, extra: int = 0) -> int:
    """Builds a hitset key from its components.

    Parameters
    ----------
    trkr_id : int
        Tracker subsystem ID (see :class:`TrkrIdEnum`)
    layer : int
        Global layer index
    extra : int, default 0
        Subsystem-specific lower 16 bits

    Returns
    -------
    int
        32-bit hitset key
    """
    assert 0 <= layer <= BYTE_MASK, f"Layer out of range: {layer}"
    assert 0 <= extra <= 0xFFFF, f"Subsystem information out of range: {extra}"

    return (int(trkr_id) << TRKR_ID_SHIFT) | (layer << LAYER_SHIFT) | extra


def gen_cluster_key(hitset_key: int, cluster_id: int) -> int:
    """Builds a cluster key from a hitset key and a cluster index."""
    return (hitset_key << HITSET_SHIFT) | (cluster_id & WORD_MASK)


def get_hitset_key(key: int) -> int:
    """Returns the hitset key embedded in a cluster key."""
    return (key >> HITSET_SHIFT) & WORD_MASK


def get_trkr_id(key: int) -> int:
    """Returns the tracker subsystem ID of a cluster key."""
    return (get_hitset_key(key) >> TRKR_ID_SHIFT) & BYTE_MASK


def get_layer(key: int) -> int:
    """Returns the layer index of a cluster key."""
    return (get_hitset_key(key) >> LAYER_SHIFT) & BYTE_MASK


def get_cluster_id(key: int) -> int:
    """Returns the cluster index of a cluster key within its hitset."""
    return key & WORD_MASK


def get_region(key: int) -> DetectorRegionEnum:
    """Returns the detector region type of a cluster key.

    Only TPC clusters belong to the radially segmented region.
    """
    if get_trkr_id(key) == TrkrIdEnum.TPC:
        return DetectorRegionEnum.RADIAL_SEGMENTED

    return DetectorRegionEnum.OTHER
