"""
Shared pytest fixtures for the statet tests.
"""
import pytest

from statet import CONTEXTS


@pytest.fixture(params=sorted(CONTEXTS))
def mf(request):
    """
    Every registered capability object in turn.
    Expected results are built with mf.pure so one test covers all contexts.
    """
    return CONTEXTS[request.param]


@pytest.fixture
def calls():
    """Records invocations of transition functions."""
    return []
