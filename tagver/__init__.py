"""
tagver - Tag Version Comparison

A Python library for ordering version-like strings as they appear in git
tags and release names, including the ones that bend SemVer.

tagver provides:
  - A flexible comparator tolerant of "v" markers, product prefixes,
    underscore and legacy "+" separators
  - Prerelease suffixes (alpha, beta, rc) that sort before the stable release
  - Postrelease suffixes (hotfix, ...) that sort after it without a
    MAJOR/MINOR/PATCH bump
  - A strict SemVer comparator with a deterministic fallback
  - YAML-configurable suffix ordering tables

Quick Start
-----------
    >>> import tagver
    >>> tagver.compare("hive.1.2.3", "v1.2.3")
    0
    >>> tagver.compare("1.2.3-hotfix", "1.2.3")
    1
    >>> tagver.sort_versions(["1.2.3", "1.2.3-rc.1", "1.2.3-hotfix"])
    ['1.2.3-rc.1', '1.2.3', '1.2.3-hotfix']

Package Structure
-----------------
versioning : package
    Flexible and strict comparators, sort keys and update checks.
config : package
    YAML loading of suffix ordering tables.
exceptions : module
    Exception hierarchy.
logging : module
    Opt-in diagnostic output.

Project Information
-------------------
License: Apache-2.0
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Total ordering for tag-style version strings"

# Re-export commonly used functions for convenience
from tagver.config import load_options
from tagver.exceptions import ConfigError, TagverError
from tagver.versioning import (
    DEFAULT_OPTIONS,
    Options,
    SuffixKind,
    canonical_semver,
    compare,
    compare_semver,
    compare_with_options,
    is_newer,
    latest_version,
    sort_versions,
    version_key,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "DEFAULT_OPTIONS",
    "Options",
    "SuffixKind",
    "canonical_semver",
    "compare",
    "compare_semver",
    "compare_with_options",
    "is_newer",
    "latest_version",
    "sort_versions",
    "version_key",
    "load_options",
    "ConfigError",
    "TagverError",
]
