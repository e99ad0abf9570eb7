"""Construct a geometry class from a detector name."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from recokit.utils.config import load_config
from recokit.utils.logger import logger

from .base import Geometry

# Get config directory relative to this module
GEO_CONFIG_DIR = Path(__file__).parent / "config"

__all__ = ["geo_factory"]


def _version_key(version: str):
    """Sorting key of a `major.minor` version string."""
    return tuple(int(part) for part in version.split("."))


def geo_dict(config_dir: Optional[Path] = None) -> Dict[Path, Dict[str, str]]:
    """Builds a dictionary of available geometry configurations.

    Parameters
    ----------
    config_dir : Path, optional
        Directory to search. Defaults to the package configuration directory.

    Returns
    -------
    dict
        Dictionary which maps each geometry file path to its name, tag and
        version
    """
    config_dir = Path(config_dir) if config_dir is not None else GEO_CONFIG_DIR
    options = {}
    for path in sorted(config_dir.glob("*/*_geometry.yaml")):
        cfg = load_config(path)
        options[path] = {k: cfg.get(k, None) for k in ("name", "tag", "version")}
        options[path]["version"] = str(float(options[path]["version"]))

    return options


def geo_factory(
    detector: str,
    tag: Optional[str] = None,
    version: Optional[Union[str, int, float]] = None,
    config_dir: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Geometry:
    """Instantiates a geometry from a detector name.

    Parameters
    ----------
    detector : str
        Name of the detector (e.g. "sphenix")
    tag : str, optional
        Geometry tag. If specified, must match exactly.
    version : str, optional
        Geometry version (e.g. "1", "1.1"). If only the major version is
        specified, the first configuration with that major version is used.
    config_dir : Path, optional
        Directory to search. Defaults to the package configuration directory.
    overrides : dict, optional
        Dot-separated parameters to replace in the loaded configuration
        (e.g. `{"tpc.layer_offset": 8}`)

    Returns
    -------
    Geometry
         Initialized geometry object
    """
    # Find geometry configurations that match the detector name
    options = geo_dict(config_dir)
    paths, tags, versions = [], [], []
    for path, cfg in options.items():
        if cfg["name"].lower() == detector.lower():
            paths.append(path)
            tags.append(cfg["tag"])
            versions.append(cfg["version"])

    if len(paths) == 0:
        raise ValueError(f"No geometry found for detector '{detector}'.")

    # If a tag is specified, must find the exact tag or throw
    if tag is not None:
        if tag not in tags:
            raise ValueError(
                f"No geometry found for detector '{detector}' with tag '{tag}'. "
                f"Available tags are: {set(tags)}"
            )
        index = tags.index(tag)
        assert version is None or str(float(version)) == versions[index], (
            f"Geometry version '{version}' does not match found version "
            f"'{versions[index]}' for detector '{detector}' with tag '{tag}'."
        )
        file_path = paths[index]

    # If a version is specified, must match the major revision if it is the
    # only one specified, or both if major and minor are specified
    elif version is not None:
        version_parts = str(version).split(".")
        file_path = None
        for i, ver in enumerate(versions):
            ver_parts = ver.split(".")
            if version_parts == ver_parts[: len(version_parts)]:
                file_path = paths[i]
                break

        if file_path is None:
            raise ValueError(
                f"No geometry found for detector '{detector}' with version "
                f"'{version}'. Available versions are: {set(versions)}"
            )

    # If no tag or version is specified, return the most recent version
    else:
        index = max(range(len(versions)), key=lambda i: _version_key(versions[i]))
        file_path = paths[index]

    logger.debug("Loading geometry from %s", file_path)
    cfg = load_config(file_path, overrides)

    return Geometry(**cfg)
