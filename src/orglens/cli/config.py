#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the orglens CLI.

A configuration file holds one table per component::

    [org]
    max-heading-level = 3

    [logbook]
    drawer-name = "CLOCKING"
    most-recent-first = false

    [html]
    css_class_map = { Heading = "note-heading" }

The same tables may live under ``[tool.orglens]`` in ``pyproject.toml``.
YAML and JSON files use the same layout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from orglens.constants import CONFIG_FILENAMES
from orglens.options import HtmlRendererOptions, LogbookParserOptions, OrgParserOptions

logger = logging.getLogger(__name__)

PYPROJECT_FILENAME = "pyproject.toml"
TOOL_SECTION = "orglens"

# Config file sections and the options class each one builds
CONFIG_SECTIONS: Dict[str, type] = {
    "org": OrgParserOptions,
    "logbook": LogbookParserOptions,
    "html": HtmlRendererOptions,
}


def _dedicated_config_names() -> list[str]:
    return [name for name in CONFIG_FILENAMES if name != PYPROJECT_FILENAME]


def _require_mapping(config: Any, config_path: Path, kind: str) -> Dict[str, Any]:
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"{kind} config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "rb") as f:
        return _require_mapping(tomllib.load(f), config_path, "TOML")


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        return _require_mapping(yaml.safe_load(f), config_path, "YAML")


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        return _require_mapping(json.load(f), config_path, "JSON")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.orglens]`` table of a pyproject.toml, or an empty dict.

    Raises
    ------
    argparse.ArgumentTypeError
        If the section exists but is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


_LOADERS_BY_SUFFIX: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _load_toml_config,
    ".yaml": _load_yaml_config,
    ".yml": _load_yaml_config,
    ".json": _load_json_config,
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name: ``pyproject.toml`` yields its
    ``[tool.orglens]`` table, other files are read by extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, cannot be parsed, or has an unsupported extension

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if config_path.name.lower() == PYPROJECT_FILENAME:
        loader: Optional[Callable[[Path], Dict[str, Any]]] = _load_pyproject_section
    else:
        loader = _LOADERS_BY_SUFFIX.get(config_path.suffix.lower())
    if loader is None:
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format: {config_path.suffix}. Use .toml, .yaml, .yml or .json"
        )

    try:
        config = loader(config_path)
    except argparse.ArgumentTypeError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or any of its parents.

    In each directory the dedicated files (``.orglens.toml``,
    ``.orglens.yaml``, ``.orglens.yml``, ``.orglens.json``) are checked
    first, then a ``pyproject.toml`` that has a ``[tool.orglens]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search, defaults to the working directory

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        for filename in _dedicated_config_names():
            candidate = directory / filename
            if candidate.is_file():
                return candidate

        pyproject_path = directory / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if load_config_file(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The working directory and its parents are searched first, then the
    dedicated config files in the user's home directory.

    Returns
    -------
    Path or None
        Path to the discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in _dedicated_config_names():
        candidate = home / filename
        if candidate.is_file():
            return candidate

    return None


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge two configuration dictionaries.

    Values from ``override`` win; nested dictionaries are merged key by key.

    Examples
    --------
    >>> merge_configs({"org": {"max-heading-level": 3}}, {"org": {"extract-metadata": False}})
    {'org': {'max-heading-level': 3, 'extract-metadata': False}}

    """
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Path from the ``ORGLENS_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty when no file is found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is named but cannot be loaded

    """
    path: Optional[Path | str] = explicit_path or env_var_path or discover_config_file()
    if not path:
        return {}
    return load_config_file(path)


def build_options(config: Dict[str, Any], section: str) -> Any:
    """Build the options object for one config section.

    Parameters
    ----------
    config : dict
        Full configuration dictionary
    section : {"org", "logbook", "html"}
        Section name

    Returns
    -------
    OrgParserOptions, LogbookParserOptions or HtmlRendererOptions
        Options with the section's recognized keys applied

    Raises
    ------
    argparse.ArgumentTypeError
        If the section is not a mapping or holds invalid values

    """
    options_class = CONFIG_SECTIONS[section]
    values = config.get(section, {})
    if not isinstance(values, dict):
        raise argparse.ArgumentTypeError(f"Config section [{section}] must be a table, got {type(values).__name__}")
    try:
        return options_class.from_mapping(values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid value in config section [{section}]: {e}") from e
