"""Fixtures for the test suite."""

import pytest

from formsconnector.connectors.activecampaign import ActiveCampaignConnector


@pytest.fixture(name="activecampaign_config")
def fixture_activecampaign_config():
    """Return a minimal valid ActiveCampaign connector configuration."""
    return {
        "api_url": "https://account.api-us1.com/",
        "api_key": "test-api-key",
        "list_id": "3",
    }


@pytest.fixture(name="connector")
def fixture_connector():
    """Return an ActiveCampaign connector."""
    return ActiveCampaignConnector()
