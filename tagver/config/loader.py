"""
Ordering configuration loading for tagver.

Suffix ordering tables can be kept in YAML files instead of code, so a
repository can declare which tags count as prereleases or postreleases.

File Format
-----------
    apiVersion: tagver/v1
    ordering:
      prerelease: [alpha, beta, rc]
      postrelease: [hotfix, hotfix2]

Both tables are optional. A missing table keeps the built-in default.

Merge Behavior
--------------
Several files may be given; they are deep-merged in order with "last wins"
semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten

So an organization-wide file can set both tables and a repository file can
override just one of them.

Error Handling
--------------
- ConfigError: Missing file, YAML parse error, empty file, bad shape
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from tagver.config import load_options
    >>> opts = load_options(Path("defaults/ordering.yaml"), Path("ordering.yaml"))
    >>> opts.prerelease_order
    ('alpha', 'beta', 'rc')
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from tagver.exceptions import ConfigError
from tagver.logging import get_global_logger
from tagver.versioning.flexible import DEFAULT_OPTIONS, Options

API_VERSION = "tagver/v1"

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed Python object from the YAML file.

    Raises:
        ConfigError: When file does not exist, invalid YAML (parse error), or empty files.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Conversion
# -------------------------------


def _table(ordering: dict[str, Any], name: str) -> tuple[str, ...] | None:
    raw = ordering.get(name)
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ConfigError(
            f"ordering.{name} must be a list of strings, got {type(raw).__name__}"
        )
    table: list[str] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, str):
            raise ConfigError(
                f"ordering.{name}[{i}] must be a string, got {entry!r}"
            )
        table.append(entry.strip())
    return tuple(table)


def options_from_mapping(data: Any) -> Options:
    """Builds Options from a parsed configuration document.

    Args:
        data: The parsed YAML document (a mapping).

    Returns:
        Options with the tables found in the document. Tables that are
        not present are left as None so the defaults apply.

    Raises:
        ConfigError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            f"configuration must be a mapping, got {type(data).__name__}"
        )

    api_version = data.get("apiVersion", API_VERSION)
    if api_version != API_VERSION:
        raise ConfigError(
            f"unsupported apiVersion {api_version!r} (expected {API_VERSION!r})"
        )

    ordering = data.get("ordering") or {}
    if not isinstance(ordering, dict):
        raise ConfigError(
            f"ordering must be a mapping, got {type(ordering).__name__}"
        )

    return Options(
        prerelease_order=_table(ordering, "prerelease"),
        postrelease_order=_table(ordering, "postrelease"),
    )


def load_options(*paths: Path) -> Options:
    """Loads suffix ordering tables from one or more YAML files.

    Args:
        *paths: Configuration files, lowest precedence first.

    Returns:
        The resulting Options. DEFAULT_OPTIONS when no paths are given.

    Raises:
        ConfigError: On a missing file, YAML error, empty file, or a
            document with the wrong shape.
    """
    logger = get_global_logger()
    if not paths:
        return DEFAULT_OPTIONS

    merged: dict[str, Any] = {}
    for p in paths:
        p = Path(p)
        data = _load_yaml_file(p)
        if not isinstance(data, dict):
            raise ConfigError(
                f"configuration must be a mapping: {p} "
                f"(got {type(data).__name__})"
            )
        logger.verbose("CONFIG", f"Loaded ordering configuration: {p}")
        merged = _deep_merge_dicts(merged, data)

    options = options_from_mapping(merged)
    logger.debug(
        "CONFIG",
        f"prerelease={options.prerelease_order} "
        f"postrelease={options.postrelease_order}",
    )
    return options
