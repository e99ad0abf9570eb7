"""Construct a generator-level event filter class from its name."""

from recokit.utils.factory import instantiate, module_dict

from . import jet, particle

# Build a dictionary of available triggers
TRIGGER_DICT = {}
for module in [particle, jet]:
    TRIGGER_DICT.update(**module_dict(module))


def trigger_factory(name, cfg=None):
    """Instantiates a trigger from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the trigger
    cfg : dict, optional
        Trigger configuration

    Returns
    -------
    TriggerBase
         Initialized trigger
    """
    cfg = dict(cfg or {})
    cfg["name"] = name

    return instantiate(TRIGGER_DICT, cfg)
