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

"""Exception hierarchy for tagver.

Comparing versions never raises: every pair of strings has a defined
order. Errors only come from the surrounding tooling:

- ConfigError: Ordering configuration problems (YAML parse, bad shape,
  missing files)

All exceptions inherit from TagverError, allowing users to catch all
tagver errors with a single except clause if needed.

Example:
    Catching configuration errors:
        ```python
        from pathlib import Path
        from tagver.config import load_options
        from tagver.exceptions import ConfigError

        try:
            options = load_options(Path("ordering.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "TagverError",
    "ConfigError",
]


class TagverError(Exception):
    """Base exception for all tagver errors."""

    pass


class ConfigError(TagverError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - Missing configuration files
    - YAML parsing (syntax errors, empty documents)
    - An unsupported apiVersion
    - Ordering tables that are not lists of strings
    """

    pass
