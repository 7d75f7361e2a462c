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

"""Sorting and update-check helpers built on the comparators.

The comparators return -1/0/1 rather than sort keys, so sorting goes
through functools.cmp_to_key.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any, Literal

from tagver.logging import Logger, get_global_logger
from tagver.versioning.flexible import Options, compare_with_options
from tagver.versioning.strict import compare_semver

__all__ = [
    "Comparator",
    "is_newer",
    "latest_version",
    "sort_versions",
    "version_key",
]

Comparator = Literal["flexible", "semver"]


def version_key(options: Options | None = None) -> Callable[[str], Any]:
    """Return a sort key that orders strings by the flexible comparator.

    Example:
        ```python
        sorted(["1.0.0-hotfix", "1.0.0", "1.0.0-rc"], key=version_key())
        # ["1.0.0-rc", "1.0.0", "1.0.0-hotfix"]
        ```
    """
    return cmp_to_key(lambda a, b: compare_with_options(a, b, options))


def sort_versions(
    versions: Iterable[str],
    *,
    options: Options | None = None,
    reverse: bool = False,
) -> list[str]:
    """Sort version strings oldest first (newest first with reverse=True)."""
    return sorted(versions, key=version_key(options), reverse=reverse)


def latest_version(
    versions: Iterable[str], *, options: Options | None = None
) -> str | None:
    """Return the newest version, or None when there are none."""
    return max(versions, key=version_key(options), default=None)


def is_newer(
    remote: str,
    current: str | None,
    *,
    comparator: Comparator = "flexible",
    options: Options | None = None,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Args:
        remote: Candidate version (e.g., the latest tag).
        current: Installed or previously seen version. None means there is
            nothing to compare against, so remote is newer.
        comparator: "flexible" for tag-style comparison, "semver" for
            strict SemVer precedence.
        options: Suffix ordering for the flexible comparator. Ignored by
            the semver comparator.
        logger: Logger for the decision trace. Defaults to the global logger.

    Returns:
        True iff remote > current.

    Raises:
        ValueError: If comparator is not a known comparator name.
    """
    if logger is None:
        logger = get_global_logger()

    if comparator == "flexible":
        cmp = lambda a, b: compare_with_options(a, b, options, logger=logger)  # noqa: E731
    elif comparator == "semver":
        cmp = lambda a, b: compare_semver(a, b, logger=logger)  # noqa: E731
    else:
        raise ValueError(f"unknown comparator: {comparator!r}")

    if current is None:
        logger.verbose(
            "VERSION", f"No current version. Treating {remote!r} as newer"
        )
        return True

    result = cmp(remote, current)
    if result > 0:
        logger.verbose(
            "VERSION", f"Remote {remote!r} is newer than current {current!r}"
        )
    elif result == 0:
        logger.verbose(
            "VERSION", f"Remote {remote!r} is the same as current {current!r}"
        )
    else:
        logger.verbose(
            "VERSION", f"Remote {remote!r} is older than current {current!r}"
        )
    return result > 0
