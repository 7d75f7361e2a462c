"""
Version comparison for tagver.

This package compares version-like strings such as git tags and release
names. Two comparators are provided:

1. **Flexible** (the default):
   - Ignores "v" markers and product prefixes ("hive.1.2.3" == "1.2.3")
   - Accepts "_" and legacy "+" separators
   - Orders prerelease < stable < postrelease using configurable tables
   - Unknown suffixes sort after the stable release

2. **Strict SemVer**:
   - Canonicalizes to "vMAJOR.MINOR.PATCH[-pre]" and applies SemVer 2.0.0
     precedence
   - Falls back to plain string comparison when either side is not SemVer

Modules
-------
flexible : module
    Normalization, tokenization, suffix classification and comparison.
strict : module
    SemVer canonicalization and precedence via the `semver` package.
keys : module
    Sort keys, latest-version selection and update checks.

Examples
--------
    >>> from tagver.versioning import compare, compare_semver
    >>> compare("v1.2.3", "1.2.3")
    0
    >>> compare("1.0.0-hotfix", "1.0.0")
    1
    >>> compare_semver("1.0.0-hotfix", "1.0.0")
    -1

Notes
-----
- Comparison never raises for string inputs.
- No network or file I/O; configuration loading lives in tagver.config.
"""

from .flexible import (
    DEFAULT_OPTIONS,
    Options,
    SuffixKind,
    classify_suffix,
    compare,
    compare_with_options,
    normalize,
    numeric_prefix_len,
    suffix_rank,
    tokenize,
)
from .keys import (
    Comparator,
    is_newer,
    latest_version,
    sort_versions,
    version_key,
)
from .strict import (
    BASELINE_SEMVER,
    canonical_semver,
    compare_semver,
    is_valid_semver,
)

__all__ = [
    "BASELINE_SEMVER",
    "DEFAULT_OPTIONS",
    "Comparator",
    "Options",
    "SuffixKind",
    "canonical_semver",
    "classify_suffix",
    "compare",
    "compare_semver",
    "compare_with_options",
    "is_newer",
    "is_valid_semver",
    "latest_version",
    "normalize",
    "numeric_prefix_len",
    "sort_versions",
    "suffix_rank",
    "tokenize",
    "version_key",
]
