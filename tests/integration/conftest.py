"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_CONGRESSGOV_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CONGRESSGOV_NETWORK_TESTS") != "1"
    or not os.environ.get("CONGRESS_GOV_API_KEY"),
    reason="Requires network access. Set RUN_CONGRESSGOV_NETWORK_TESTS=1 and CONGRESS_GOV_API_KEY",
)
