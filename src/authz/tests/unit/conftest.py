"""Unit test fixtures with mocked dependencies."""

from unittest.mock import Mock

import pytest

from shared_kernel.authorization.policy import MapPolicyResolver
from shared_kernel.authorization.policy.observability import PolicyResolverProbe


@pytest.fixture
def mock_probe():
    """Provide a mocked policy resolver probe."""
    return Mock(spec=PolicyResolverProbe)


@pytest.fixture
def resolver(mock_probe):
    """Provide an empty map resolver wired to the mocked probe."""
    return MapPolicyResolver(probe=mock_probe)
