# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Strict SemVer comparison with a deterministic fallback.

Versions are written with a leading "v" marker (v1.2.3). Parsing and
precedence come from the `semver` package. Unlike the flexible comparator,
any suffix here is a prerelease, so 1.0.0-foo < 1.0.0.

If either side is not valid SemVer, the original strings are compared as
plain text so the ordering stays total.
"""

from __future__ import annotations

import re

import semver

from tagver.logging import Logger, get_global_logger

__all__ = [
    "BASELINE_SEMVER",
    "canonical_semver",
    "compare_semver",
    "is_valid_semver",
]

BASELINE_SEMVER = "v0.0.0"

# vMAJOR and vMAJOR.MINOR are accepted only without prerelease or build.
_SHORTHAND = re.compile(r"(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))?")


def _parse(v: str) -> semver.Version | None:
    """Parse a marker-prefixed version, or return None if it is not SemVer."""
    if not v.startswith("v"):
        return None
    body = v[1:]
    # semver's pattern accepts Unicode digits and a trailing newline.
    if not body.isascii() or body.endswith("\n"):
        return None
    try:
        return semver.Version.parse(body)
    except ValueError:
        pass
    if _SHORTHAND.fullmatch(body):
        return semver.Version.parse(body, optional_minor_and_patch=True)
    return None


def is_valid_semver(input: str) -> bool:
    """Check whether input is valid SemVer once the "v" marker is added."""
    return _parse(_with_marker(input)) is not None


def _with_marker(input: str) -> str:
    if not input:
        return BASELINE_SEMVER
    if input[0] != "v":
        return "v" + input
    return input


def canonical_semver(input: str) -> str:
    """Normalize a SemVer-like string to its canonical form.

    Args:
        input: Version string, with or without the "v" marker.

    Returns:
        "v0.0.0" for an empty string. The canonical "vMAJOR.MINOR.PATCH[-pre]"
        text for valid SemVer (build metadata dropped, shorthand padded).
        Otherwise the input with the "v" marker added, unchanged.

    Example:
        ```python
        canonical_semver("1.2.3+build.5")  # "v1.2.3"
        canonical_semver("v1.2")           # "v1.2.0"
        canonical_semver("banana")         # "vbanana"
        ```
    """
    v = _with_marker(input)
    parsed = _parse(v)
    if parsed is None:
        return v
    return "v" + str(parsed.replace(build=None))


def compare_semver(a: str, b: str, *, logger: Logger | None = None) -> int:
    """Compare two versions using strict SemVer precedence.

    If both inputs are valid SemVer after canonical_semver, SemVer 2.0.0
    precedence decides (build metadata ignored). Otherwise the original
    inputs are compared as plain strings.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b.
    """
    if logger is None:
        logger = get_global_logger()

    va = _parse(canonical_semver(a))
    vb = _parse(canonical_semver(b))
    if va is not None and vb is not None:
        result = va.compare(vb)
        logger.debug("SEMVER", f"{a!r} vs {b!r}: precedence -> {result}")
        return result

    result = (a > b) - (a < b)
    logger.debug("SEMVER", f"{a!r} vs {b!r}: not SemVer, lexicographic -> {result}")
    return result
