"""Contains functions needed to instantiate a class from a dictionary.

This allows to generically convert a YAML block into an instatiated class
with all the appropriate checks that the class exists and is provided
with appropriate arguments.
"""

from copy import deepcopy
from warnings import warn

from .logger import logger

__all__ = ["module_dict", "instantiate"]


def module_dict(module, class_name=None):
    """Converts module into a dictionary which maps class names onto classes.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes
    class_name : str, optional
        If specified, only warn about deprecated aliases matching it

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    options = {}
    for cls_name in getattr(module, "__all__", dir(module)):
        # Skip private objects
        if cls_name[0] == "_":
            continue

        # Only consider classes which belong to the module of interest
        cls = getattr(module, cls_name)
        if not isinstance(cls, type) or module.__name__ not in cls.__module__:
            continue

        options[cls_name] = cls
        if getattr(cls, "name", None):
            options[cls.name] = cls

        # Aliases are allowed but should be avoided
        for al in getattr(cls, "aliases", ()):
            if class_name is not None and class_name == al:
                warn(
                    f"This name ({al}) is deprecated. Use {cls.name} instead.",
                    DeprecationWarning,
                )
            options[al] = cls

    return options


def instantiate(module_dict, cfg, alt_name=None, **kwargs):
    """Instantiates a class based on a configuration dictionary and a list of
    possible classes to chose from.

    This function supports two YAML configuration structures
    (parsed as a dictionary):

    .. code-block:: yaml

        module:
          name: module_name
          kwarg_1: value_1
          kwarg_2: value_2

    or

    .. code-block:: yaml

        module:
          name: module_name
          args: [value_1, value_2]
          kwargs:
            kwarg_1: value_1

    Parameters
    ----------
    module_dict : dict
        Dictionary which maps a class name onto an object class.
    cfg : Union[str, dict]
        Configuration dictionary, or simply the name of the class
    alt_name : str, optional
        Key under which the class name can be specified, beside 'name' itself
    **kwargs : dict, optional
        Additional parameters to pass to the class constructor

    Returns
    -------
    object
        Instantiated object
    """
    # A string is a class name with no parameters
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    config = deepcopy(cfg)
    if alt_name is not None:
        assert (alt_name in config) ^ (
            "name" in config
        ), f"Should specify one of `name` or `{alt_name}`"
        name = alt_name if alt_name in config else "name"
    else:
        assert "name" in config, "Could not find the name of the class under `name`"
        name = "name"

    class_name = config.pop(name)
    if class_name not in module_dict:
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary which maps names "
            f"to classes. Available names: {list(module_dict.keys())}"
        )

    # Gather the arguments and keyword arguments to pass to the constructor
    args = config.pop("args", [])
    kwargs = dict(config.pop("kwargs", {}), **kwargs)
    for key in config.keys():
        assert key not in kwargs, (
            f"The keyword argument {key} is provided "
            "at the top level and under `kwargs`. Ambiguous."
        )
    kwargs.update(config)

    cls = module_dict[class_name]
    try:
        return cls(*args, **kwargs)

    except Exception as err:
        logger.error(
            f"Failed to instantiate {cls.__name__} with these arguments:\n"
            f"  - args: {args}\n  - kwargs: {kwargs}"
        )

        raise err
