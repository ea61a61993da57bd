"""Fixtures and utilities for E2E tests."""

import os
import shutil

import pytest


def has_cli(command: str) -> bool:
    """Check if a CLI command is available."""
    return shutil.which(command) is not None


@pytest.fixture
def e2e_enabled():
    """Skip unless E2E tests are enabled and git/go are installed."""
    if not os.getenv("GO2RPM_E2E"):
        pytest.skip("E2E tests disabled (set GO2RPM_E2E to enable)")
    for command in ("git", "go"):
        if not has_cli(command):
            pytest.skip(f"{command} CLI not available")


@pytest.fixture
def e2e_workspace(tmp_path):
    """Workspace directory kept for the duration of a test."""
    workspace = tmp_path / "e2e_workspace"
    workspace.mkdir()
    return workspace
