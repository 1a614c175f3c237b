from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from etherscan_async.cli import RawQuery, app, parse_pairs
from etherscan_async.client import EtherscanClient
from etherscan_async.config import settings
from etherscan_async.errors import EtherscanRequestError
from etherscan_async.networks import Network

runner = CliRunner()


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.execute = AsyncMock(return_value="12345")
    client.get_balance = AsyncMock(return_value="100")
    client.get_balance_multi = AsyncMock(return_value="multi")
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)

    with patch("etherscan_async.cli.EtherscanClient", return_value=client) as factory:
        client.factory = factory
        yield client


def test_parse_pairs_keeps_order():
    assert parse_pairs(["address=0xabc", "tag=latest", "data="]) == (
        ("address", "0xabc"),
        ("tag", "latest"),
        ("data", ""),
    )


def test_parse_pairs_rejects_missing_separator():
    with pytest.raises(typer.BadParameter):
        parse_pairs(["address"])


def test_raw_query_renders_pairs():
    assert RawQuery(pairs=(("a", "1"), ("b", "2"))).to_query() == [("a", "1"), ("b", "2")]


def test_call_command(mock_client):
    result = runner.invoke(
        app, ["call", "account", "balance", "-p", "address=0xabc", "--api-key", "k", "--network", "sepolia"]
    )

    assert result.exit_code == 0
    assert "12345" in result.stdout
    module, action, params = mock_client.execute.call_args.args
    assert (module, action) == ("account", "balance")
    assert params.to_query() == [("address", "0xabc")]
    assert mock_client.factory.call_args.kwargs["network"] == "sepolia"


def test_balance_command_single(mock_client):
    result = runner.invoke(app, ["balance", "0xabc", "--api-key", "k"])

    assert result.exit_code == 0
    assert "100" in result.stdout
    mock_client.get_balance.assert_called_once_with("0xabc", tag="latest")


def test_balance_command_multi(mock_client):
    result = runner.invoke(app, ["balance", "0xA", "0xB", "--api-key", "k"])

    assert result.exit_code == 0
    mock_client.get_balance_multi.assert_called_once_with(["0xA", "0xB"], tag="latest")


def test_call_command_error_exits_nonzero(mock_client):
    mock_client.execute.side_effect = EtherscanRequestError("stats", "ethprice", "Request failed")

    result = runner.invoke(app, ["call", "stats", "ethprice", "--api-key", "k"])

    assert result.exit_code == 1


@pytest.mark.parametrize("key", ["module", "action", "apikey"])
def test_parse_pairs_rejects_client_fields(key):
    with pytest.raises(typer.BadParameter):
        parse_pairs(["address=0xabc", f"{key}=x"])


def test_call_command_rejects_client_fields(mock_client):
    args = ["call", "stats", "ethprice", "-p", "apikey=x", "-p", "module=account", "--api-key", "k"]
    result = runner.invoke(app, args)

    assert result.exit_code != 0
    mock_client.execute.assert_not_called()


def test_network_defaults_to_settings(mock_client):
    result = runner.invoke(app, ["balance", "0xabc", "--api-key", "k"])

    assert result.exit_code == 0
    assert mock_client.factory.call_args.kwargs["network"] is None


def test_network_from_settings_reaches_client():
    with patch.object(settings, "network", Network.GOERLI):
        client = EtherscanClient(api_key="k", network=None)
    assert client.base_url == "https://api-goerli.etherscan.io/api"
