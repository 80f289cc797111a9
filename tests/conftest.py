"""
Shared test fixtures and utilities for the formtree test suite.
"""

import pytest

from formtree.config import get_options, reset_options
from formtree.datasources import InboundRequest
from formtree.form import Form


@pytest.fixture(autouse=True)
def restore_options():
    """Restore global options after every test."""
    options = get_options()
    yield
    reset_options(options)


@pytest.fixture
def submitted_request():
    """Request carrying the tracking field of form ``f1`` and one user value.

    Usage:
        def test_something(submitted_request):
            form = Form("f1", request=submitted_request)
    """
    return InboundRequest(
        url="/register",
        body={"_qf__f1": "", "name": "Alice", "addr": {"city": "Oslo"}},
    )


@pytest.fixture
def submitted_form(submitted_request):
    """Form ``f1`` built for a request that submitted it."""
    return Form("f1", "post", request=submitted_request)


@pytest.fixture
def fresh_form():
    """Form ``f1`` built for a request that did not submit it."""
    return Form("f1", "post", request=InboundRequest(url="/register"))
