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

"""Flexible comparison of tag-style version strings.

Git tags and release names rarely follow SemVer to the letter. This module
compares them anyway, with a total and deterministic order:

- A leading "v"/"V" is ignored (v1.2.3 == 1.2.3).
- A product prefix before the first digit is ignored (hive.1.2.3 == 1.2.3).
- Underscores are treated as dots (1_2_3 == 1.2.3).
- "+" is SemVer build metadata when the version already has dots (dropped),
  otherwise a legacy separator (1+2+3 == 1.2.3).
- Extra numeric components are newer (1.2.3.1 > 1.2.3).
- Suffixes are classified as prerelease (sorts before the stable release)
  or postrelease (sorts after it). Unknown suffixes are postrelease.

The ordering tables are configurable through Options. The module does no
I/O and keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import IntEnum
import re

from tagver.logging import Logger, get_global_logger

__all__ = [
    "DEFAULT_OPTIONS",
    "Options",
    "SuffixKind",
    "classify_suffix",
    "compare",
    "compare_with_options",
    "normalize",
    "numeric_prefix_len",
    "suffix_rank",
    "tokenize",
]

# ----------------------------
# Configuration
# ----------------------------


def _as_table(value: Sequence[str] | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        # A bare string would otherwise be split into characters.
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Options:
    """Suffix ordering tables for the flexible comparator.

    Attributes:
        prerelease_order: Prerelease suffixes from oldest to newest.
            Example: ("alpha", "beta", "rc") gives
            1.0.0-alpha < 1.0.0-beta < 1.0.0-rc < 1.0.0.
        postrelease_order: Postrelease suffixes from oldest to newest.
            Example: ("hotfix", "hotfix2") gives
            1.0.0 < 1.0.0-hotfix < 1.0.0-hotfix2.

    A table left as None (or empty) falls back to the matching
    DEFAULT_OPTIONS table when comparing.
    """

    prerelease_order: tuple[str, ...] | None = None
    postrelease_order: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerelease_order", _as_table(self.prerelease_order))
        object.__setattr__(
            self, "postrelease_order", _as_table(self.postrelease_order)
        )

    def resolved(self) -> Options:
        """Return a copy with empty tables replaced by the defaults."""
        return replace(
            self,
            prerelease_order=self.prerelease_order
            or DEFAULT_OPTIONS.prerelease_order,
            postrelease_order=self.postrelease_order
            or DEFAULT_OPTIONS.postrelease_order,
        )


DEFAULT_OPTIONS = Options(
    prerelease_order=("alpha", "beta", "rc"),
    postrelease_order=("hotfix",),
)


class SuffixKind(IntEnum):
    """Classification of the non-numeric tail of a version.

    Values are ordered: PRERELEASE < NONE < POSTRELEASE.
    """

    PRERELEASE = 0
    NONE = 1
    POSTRELEASE = 2


# ----------------------------
# Normalization and tokens
# ----------------------------

_FIRST_DIGIT = re.compile(r"\d")
_TOKEN_SEP = re.compile(r"[.-]")
_NUMERIC_TOKEN = re.compile(r"[0-9]+")


def normalize(s: str) -> str:
    """Normalize a version-like string for tokenization.

    Steps, in order:

    1. Strip surrounding whitespace.
    2. Drop one leading "v" or "V".
    3. Drop everything before the first digit (product prefix).
    4. Replace "_" with ".".
    5. Resolve "+": truncate at the first "+" when the string has a dot
       (build metadata), else replace every "+" with ".".

    Args:
        s: Raw version string.

    Returns:
        The normalized string.

    Example:
        ```python
        normalize(" hive.v1_2_3+build.7 ")  # "1.2.3"
        normalize("1+0+0")                  # "1.0.0"
        ```
    """
    s = s.strip()
    if s[:1] in ("v", "V"):
        s = s[1:]

    m = _FIRST_DIGIT.search(s)
    if m and m.start() > 0:
        s = s[m.start() :]

    s = s.replace("_", ".")

    plus = s.find("+")
    if plus >= 0:
        has_dot = "." in s
        if has_dot:
            s = s[:plus]
        else:
            s = s.replace("+", ".")
    return s


def tokenize(s: str) -> list[str]:
    """Split a normalized version on "." and "-", keeping empty tokens."""
    return _TOKEN_SEP.split(s)


def _as_int(token: str) -> int | None:
    """Parse an unsigned ASCII decimal token, or None if it is not one."""
    if _NUMERIC_TOKEN.fullmatch(token):
        return int(token)
    return None


def numeric_prefix_len(tokens: Sequence[str]) -> int:
    """Count the leading tokens that are entirely numeric."""
    for i, token in enumerate(tokens):
        if _as_int(token) is None:
            return i
    return len(tokens)


# ----------------------------
# Suffix classification
# ----------------------------


def suffix_rank(suffix: str, order: Sequence[str]) -> int:
    """Return the 1-based position of the first table entry found in suffix.

    Matching is a case-insensitive substring test. Empty entries are
    skipped. Returns 0 when nothing matches.
    """
    suffix = suffix.lower()
    for i, token in enumerate(order):
        if not token:
            continue
        if token.lower() in suffix:
            return i + 1
    return 0


def classify_suffix(
    suffix: str, options: Options = DEFAULT_OPTIONS
) -> tuple[SuffixKind, int]:
    """Classify a suffix and return its kind together with its table rank.

    The postrelease table is checked before the prerelease table. A suffix
    matching neither is a postrelease with rank 0.
    """
    opts = options.resolved()
    if not suffix.strip():
        return SuffixKind.NONE, 0

    rank = suffix_rank(suffix, opts.postrelease_order)
    if rank > 0:
        return SuffixKind.POSTRELEASE, rank

    rank = suffix_rank(suffix, opts.prerelease_order)
    if rank > 0:
        return SuffixKind.PRERELEASE, rank

    return SuffixKind.POSTRELEASE, 0


# ----------------------------
# Comparison
# ----------------------------


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _compare_positional(t1: Sequence[str], t2: Sequence[str]) -> int:
    """Compare two full token lists position by position.

    A missing token is smaller than a present one. Numeric tokens compare
    by value and beat non-numeric tokens; other tokens compare as strings.
    """
    for i in range(max(len(t1), len(t2))):
        if i >= len(t1):
            return -1
        if i >= len(t2):
            return 1

        ta, tb = t1[i], t2[i]
        if ta == tb:
            continue

        na, nb = _as_int(ta), _as_int(tb)
        if na is not None and nb is not None:
            # "0" and "00" carry the same value; keep looking.
            if na != nb:
                return _sign(na - nb)
            continue
        if na is not None:
            return 1
        if nb is not None:
            return -1
        return -1 if ta < tb else 1
    return 0


def compare_with_options(
    a: str,
    b: str,
    options: Options | None = None,
    *,
    logger: Logger | None = None,
) -> int:
    """Compare two version-like strings using custom suffix ordering.

    Args:
        a: First version string.
        b: Second version string.
        options: Suffix ordering tables. None, or a None/empty table,
            uses DEFAULT_OPTIONS.
        logger: Logger for debug traces. Defaults to the global logger.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b.

    Example:
        Reverse the prerelease order (rc < beta < alpha):
            ```python
            opts = Options(prerelease_order=["rc", "beta", "alpha"])
            compare_with_options("1.0.0-alpha", "1.0.0-rc", opts)  # 1
            ```
    """
    if logger is None:
        logger = get_global_logger()
    opts = (options or DEFAULT_OPTIONS).resolved()

    na = normalize(a)
    nb = normalize(b)
    if na == nb:
        logger.debug("COMPARE", f"{a!r} and {b!r} normalize to {na!r}")
        return 0

    t1 = tokenize(na)
    t2 = tokenize(nb)
    n1 = numeric_prefix_len(t1)
    n2 = numeric_prefix_len(t2)

    for i in range(min(n1, n2)):
        x, y = int(t1[i]), int(t2[i])
        if x != y:
            logger.debug(
                "COMPARE", f"{a!r} vs {b!r}: numeric component {i} ({x} vs {y})"
            )
            return _sign(x - y)

    # 1.0.0.1 > 1.0.0
    if n1 != n2:
        logger.debug(
            "COMPARE", f"{a!r} vs {b!r}: numeric length ({n1} vs {n2})"
        )
        return _sign(n1 - n2)

    suffix1 = "-".join(t1[n1:])
    suffix2 = "-".join(t2[n2:])
    kind1, rank1 = classify_suffix(suffix1, opts)
    kind2, rank2 = classify_suffix(suffix2, opts)

    if kind1 != kind2:
        logger.debug(
            "COMPARE",
            f"{a!r} vs {b!r}: suffix kind ({kind1.name} vs {kind2.name})",
        )
        return _sign(kind1 - kind2)

    if kind1 != SuffixKind.NONE and rank1 > 0 and rank2 > 0 and rank1 != rank2:
        logger.debug(
            "COMPARE",
            f"{a!r} vs {b!r}: {kind1.name} rank ({rank1} vs {rank2})",
        )
        return _sign(rank1 - rank2)

    result = _compare_positional(t1, t2)
    logger.debug("COMPARE", f"{a!r} vs {b!r}: positional tokens -> {result}")
    return result


def compare(a: str, b: str) -> int:
    """Compare two version-like strings with the default suffix ordering.

    Returns -1 if a < b, 0 if a == b, 1 if a > b.
    """
    return compare_with_options(a, b, DEFAULT_OPTIONS)
