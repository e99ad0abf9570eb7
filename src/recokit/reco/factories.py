"""Construct a reconstruction algorithm class from its name."""

from recokit.utils.factory import instantiate, module_dict

from . import mvtx_mapper, tpc_mover

# Build a dictionary of available reconstruction algorithms
RECO_DICT = {}
for module in [tpc_mover, mvtx_mapper]:
    RECO_DICT.update(**module_dict(module))


def reco_factory(name, cfg=None, geo=None):
    """Instantiates a reconstruction algorithm from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the reconstruction algorithm
    cfg : dict, optional
        Algorithm configuration
    geo : Geometry, optional
        Detector geometry to provide to the algorithm

    Returns
    -------
    object
         Initialized reconstruction algorithm
    """
    cfg = dict(cfg or {})
    cfg["name"] = name
    if geo is not None:
        return instantiate(RECO_DICT, cfg, geo=geo)

    return instantiate(RECO_DICT, cfg)
