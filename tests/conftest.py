"""
Pytest configuration and shared fixtures for tagver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from tagver.logging import get_global_logger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_ordering_data() -> dict[str, Any]:
    """Provide a complete ordering configuration document."""
    return {
        "apiVersion": "tagver/v1",
        "ordering": {
            "prerelease": ["dev", "alpha", "beta", "rc"],
            "postrelease": ["hotfix", "patch"],
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Reset the global logger after each test so output stays silent."""
    previous = get_global_logger()
    yield
    set_global_logger(previous)


@pytest.fixture
def symmetry_versions() -> list[str]:
    """Representative versions for all-pairs ordering checks."""
    return [
        "",
        "release",
        "1.0.0",
        "v1.0.0",
        "hive.1.0.0",
        "1_0_0",
        "1+0+0",
        "1.00.0",
        "1.0.0+build.1",
        "1.0.0.1",
        "1.0.1",
        "1.0.2-alpha",
        "1.0.2-beta",
        "1.0.2-beta.2",
        "1.0.2-rc",
        "1.0.2-rc.1",
        "1.0.2-RC.10",
        "1.0.2",
        "1.0.2-hotfix",
        "1.0.2-hotfix1",
        "1.0.2-hotfix10",
        "1.0.2-foo",
        "1.0.2..",
        "1.1.0",
        "2.0.0",
    ]
