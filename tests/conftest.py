"""Pytest configuration for motionframe tests.

This file is automatically loaded by pytest before running tests.
It configures the Python path so that the motionframe package can be imported
without installing it, and provides small scene fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path
# This allows `from motionframe.core import ...` to work
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from motionframe.core.context import ResolutionContext  # noqa: E402
from motionframe.core.elements import Action, Object  # noqa: E402


@pytest.fixture
def context():
    return ResolutionContext()


@pytest.fixture
def background_with_actions():
    """Background on frames 1-30 with two actions sharing its frames."""
    background = Object((1, 30), name="background")
    background.add_action(Action(name="x"))
    background.add_action(Action(name="y"))
    return background
