"""Module in charge of loading recokit configuration files.

Configuration files are plain YAML with three additions:
- a top-level `include` key (file name or list of file names) which pulls
  in other files first, the body of the including file being merged on top;
- an `!include file.yaml` tag which replaces a single block by the content
  of another file;
- dotted keys (e.g. `tpc.layer_offset: 8`) which set a single nested value
  once everything else is merged.

Included paths are resolved relative to the including file.
"""

from copy import deepcopy
from pathlib import Path

import yaml

__all__ = ["ConfigLoader", "load_config", "merge_config", "apply_overrides"]


class ConfigLoader(yaml.SafeLoader):
    """Safe YAML loader which understands the `!include` tag."""

    def __init__(self, stream):
        """Initialize the loader.

        Parameters
        ----------
        stream : _io.TextIOWrapper
            Output of python's `open` function on a yaml file
        """
        self._root = Path(stream.name).parent
        super().__init__(stream)

    def include(self, node):
        """Replaces a tagged block by the content of the file it names."""
        return load_config(self._root / self.construct_scalar(node))


ConfigLoader.add_constructor("!include", ConfigLoader.include)


def merge_config(base, update):
    """Merges two configuration dictionaries, recursing into sub-blocks.

    Parameters
    ----------
    base : dict
        Configuration to start from (left untouched)
    update : dict
        Configuration whose values take precedence

    Returns
    -------
    dict
        New merged configuration
    """
    merged = deepcopy(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = deepcopy(value)

    return merged


def apply_overrides(cfg, overrides):
    """Sets nested configuration values from dot-separated paths.

    Missing intermediate blocks are created.

    Parameters
    ----------
    cfg : dict
        Configuration to modify in place
    overrides : dict
        Maps dot-separated paths (e.g. "mvtx.segmentation.n_rows") to values

    Returns
    -------
    dict
        Modified configuration
    """
    for path, value in overrides.items():
        *parents, leaf = path.split(".")
        block = cfg
        for key in parents:
            block = block.setdefault(key, {})
            if not isinstance(block, dict):
                raise ValueError(
                    f"Cannot override '{path}': '{key}' is not a configuration block."
                )
        block[leaf] = value

    return cfg


def load_config(cfg_path, overrides=None):
    """Loads a configuration file to a dictionary.

    Parameters
    ----------
    cfg_path : Union[str, Path]
        Path to the configuration file
    overrides : dict, optional
        Dot-separated paths to override once the file is fully loaded. They
        are applied after the dotted keys of the file itself.

    Returns
    -------
    dict
        Loaded configuration dictionary
    """
    cfg_path = Path(cfg_path)
    with open(cfg_path, "r", encoding="utf-8") as f:
        body = yaml.load(f, Loader=ConfigLoader) or {}

    # Split the body into include directives, dotted keys and regular blocks
    includes = body.pop("include", [])
    if isinstance(includes, str):
        includes = [includes]
    elif not isinstance(includes, list):
        raise ValueError(
            f"'include' must be a file name or a list of file names, got {includes}."
        )

    dotted = {k: body.pop(k) for k in [k for k in body if "." in k]}

    # Included files come first, in order, then the body of this file
    cfg = {}
    for name in includes:
        include_path = cfg_path.parent / name
        if not include_path.is_file():
            raise FileNotFoundError(f"Included file not found: {include_path}")
        cfg = merge_config(cfg, load_config(include_path))

    cfg = merge_config(cfg, body)
    apply_overrides(cfg, dotted)
    if overrides:
        apply_overrides(cfg, overrides)

    return cfg
