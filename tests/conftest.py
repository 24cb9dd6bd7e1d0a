"""
Shared fixtures for postprocessor tests
"""

import pytest

from mdpost.lib.log import state_connectToLogger
from mdpost.models.context import Context
from mdpost.models.state import RunState


@pytest.fixture
def context():
    """Context with no frontmatter"""
    return Context()


@pytest.fixture
def run_state():
    """RunState at trace verbosity, connected to the logger for the test"""
    state = RunState(verbosity=3)
    state_connectToLogger(state)
    yield state
    state_connectToLogger(None)
