"""
Pytest configuration for gateway attribute tests.
"""

from __future__ import annotations

import pytest

DEFAULT_SCOPE_ADDRESS = "scope1qzn7jghj8puprmdcvunm3330jutsj803zz"
DEFAULT_TARGET_ACCOUNT = "tp12vu3ww5tfta78fl3fvehacunrud4gtqqcpfwnr"


@pytest.fixture
def access_grant():
    """Create an access grant generator with default addresses."""
    from os_gateway_attributes import OsGatewayAttributeGenerator

    return OsGatewayAttributeGenerator.access_grant(DEFAULT_SCOPE_ADDRESS, DEFAULT_TARGET_ACCOUNT)


@pytest.fixture
def access_revoke():
    """Create an access revoke generator with default addresses."""
    from os_gateway_attributes import OsGatewayAttributeGenerator

    return OsGatewayAttributeGenerator.access_revoke(DEFAULT_SCOPE_ADDRESS, DEFAULT_TARGET_ACCOUNT)
