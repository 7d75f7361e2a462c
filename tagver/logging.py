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

"""Logging interface for tagver.

Library modules report what they are doing through a small logger protocol
instead of printing directly. The logger can be configured globally or
passed as a parameter for better isolation.

The logger supports two output levels:
- Verbose: Only printed when verbose mode is enabled (decisions such as
  "remote is newer than current")
- Debug: Only printed when debug mode is enabled, implies verbose (which
  rule decided each comparison)

Example:
    Configure global logger:
        ```python
        from tagver.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        ```

    Use with dependency injection:
        ```python
        from tagver.logging import get_logger
        from tagver.versioning import compare_with_options

        compare_with_options("1.0.0-rc.1", "1.0.0", logger=get_logger(debug=True))
        # [COMPARE] '1.0.0-rc.1' vs '1.0.0': suffix kind (PRERELEASE vs NONE)
        ```

Note:
    The default global logger is silent, so comparisons print nothing
    unless a caller opts in.
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "VERSION", "CONFIG").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "COMPARE", "SEMVER").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Default logger implementation that prints to stdout."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message (only when verbose mode is active)."""
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message (only when debug mode is active)."""
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a logger instance with specified verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A logger instance configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Get the global logger instance.

    Returns:
        The current global logger instance.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects every comparison that is not given a logger
        explicitly. For better isolation, pass logger instances directly.
    """
    global _global_logger
    _global_logger = logger
