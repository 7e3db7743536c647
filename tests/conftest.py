"""Shared fixtures for valchain tests."""

from __future__ import annotations

import pytest

from valchain.rules import build_default_registry


@pytest.fixture
def registry():
    """Default rule registry for building chains."""
    return build_default_registry()
