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

"""Configuration loading for tagver.

This module loads suffix ordering tables from YAML files. Several files can
be layered (for example an organization-wide file, then a repository file);
dicts are merged recursively and lists/scalars are replaced (last wins).

Public API:

- load_options: Load and merge ordering configuration into Options
- options_from_mapping: Build Options from an already-parsed document

Example:
    Basic usage:

        from pathlib import Path
        from tagver.config import load_options
        from tagver.versioning import compare_with_options

        options = load_options(Path("ordering.yaml"))
        compare_with_options("2.0.0-p2", "2.0.0-p1", options)

"""

from .loader import API_VERSION, load_options, options_from_mapping

__all__ = ["API_VERSION", "load_options", "options_from_mapping"]
