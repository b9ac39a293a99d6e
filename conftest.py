"""
Root conftest.py - Sets up the Python path and shared fixtures for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import os
import sys

import pytest

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


class Recorder:
    """Listener that records every model it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, model):
        self.calls.append(model)

    @property
    def count(self):
        return len(self.calls)

    def reset(self):
        self.calls.clear()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def tf():
    from tfeditor import create_transfer_function
    return create_transfer_function()
