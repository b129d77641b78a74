"""Shared fixtures for module_wrapper tests."""

import sys
from pathlib import Path

import pytest

# Add parent and fixtures to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from module_wrapper import create_bridge

FIXTURES = Path(__file__).parent / "fixtures"


class CountingLoader:
    """Loader that records every name it was asked for."""

    def __init__(self, modules=None):
        self.modules = modules or {}
        self.calls = []

    def __call__(self, name):
        self.calls.append(name)
        if name in self.modules:
            return self.modules[name]
        raise ImportError(f"No module named {name!r}", name=name)


@pytest.fixture
def bridge():
    return create_bridge()


@pytest.fixture
def native(bridge):
    """Handle to the fixture module on a fresh bridge."""
    return bridge.load_module("native_fixture")


@pytest.fixture
def fixtures_dir():
    return FIXTURES
