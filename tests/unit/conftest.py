"""Shared pytest fixtures for SSP admission tests."""

import pytest

from tests.fixtures.fake_cluster import FakeClusterReader
from tests.fixtures.ssp_resources import TEMPLATES_NAMESPACE


@pytest.fixture
def reader():
    """Empty cluster holding only the common templates namespace."""
    return FakeClusterReader(namespaces=[TEMPLATES_NAMESPACE])
