import pytest
from unittest.mock import AsyncMock

from tarkov_stats.core.tarkov_api import TarkovAPIClient
from tarkov_stats.core.tarkov_api.errors import PlayerNotFoundError
from tarkov_stats.features.players.gateway import TarkovAPIGateway


@pytest.fixture
def mock_tarkov_client():
    return AsyncMock(spec=TarkovAPIClient)


@pytest.fixture
def gateway(mock_tarkov_client):
    return TarkovAPIGateway(mock_tarkov_client)


async def test_fetch_search_index(gateway, mock_tarkov_client, sample_index):
    """Test fetching the index through the gateway"""
    mock_tarkov_client.get_search_index.return_value = sample_index

    result = await gateway.fetch_search_index()

    assert result == sample_index
    mock_tarkov_client.get_search_index.assert_called_once_with()


async def test_fetch_profile(gateway, mock_tarkov_client, sample_profile):
    """Test fetching a profile through the gateway"""
    mock_tarkov_client.get_profile.return_value = sample_profile

    result = await gateway.fetch_profile("7654321")

    assert result is sample_profile
    mock_tarkov_client.get_profile.assert_called_once_with("7654321")


async def test_fetch_profile_errors_pass_through(gateway, mock_tarkov_client):
    mock_tarkov_client.get_profile.side_effect = PlayerNotFoundError()

    with pytest.raises(PlayerNotFoundError):
        await gateway.fetch_profile("1")
