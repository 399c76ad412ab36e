"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Captured output streams
- An injected environment and ShellContext
- Small executable scripts in temporary PATH directories
"""

import io
import os

import pytest

from tinysh.config import ShellConfig
from tinysh.context import ShellContext


@pytest.fixture
def bin_dir(tmp_path):
    """A fresh directory to put test executables in."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_executable(bin_dir):
    """
    Factory fixture creating a /bin/sh script.

    Usage:
        script = make_executable("tool", "exit 0")
        script = make_executable("tool", "exit 0", directory=other_dir)
    """
    def _make(name, body="exit 0", directory=None, mode=0o755):
        target_dir = directory or bin_dir
        script = target_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(mode)
        return script
    return _make


@pytest.fixture
def env(bin_dir, tmp_path):
    """Injected environment with PATH pointing at bin_dir."""
    home = tmp_path / "home"
    home.mkdir()
    return {"PATH": str(bin_dir), "HOME": str(home)}


@pytest.fixture
def capture_output():
    """Provide StringIO objects for stdout and stderr."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def context(env, capture_output):
    """ShellContext with an injected environment and captured streams."""
    stdout, stderr = capture_output
    return ShellContext(env=env, config=ShellConfig(), stdout=stdout, stderr=stderr)


@pytest.fixture
def restore_cwd(monkeypatch):
    """Restore the working directory after tests that run cd."""
    monkeypatch.chdir(os.getcwd())
