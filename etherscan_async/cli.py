"""Command line access to the Etherscan API."""

import asyncio

import typer
from dotenv import load_dotenv

from etherscan_async.client import EtherscanClient
from etherscan_async.errors import EtherscanError
from etherscan_async.logging_config import configure_logging
from etherscan_async.networks import Network
from etherscan_async.params import BASE_FIELDS, QueryParams

app = typer.Typer(help="Query the Etherscan API and print the raw result.")


class RawQuery(QueryParams):
    """Free-form parameters given on the command line, sent in order."""

    pairs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def wire_names(cls) -> tuple[str, ...]:
        return ()

    def to_query(self) -> list[tuple[str, str]]:
        return list(self.pairs)


def parse_pairs(values: list[str]) -> tuple[tuple[str, str], ...]:
    """Parse ``key=value`` arguments, keeping their order."""
    pairs = []
    for value in values:
        key, sep, rest = value.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {value!r}")
        if key in BASE_FIELDS:
            raise typer.BadParameter(f"{key!r} is set by the client and cannot be passed as a parameter")
        pairs.append((key, rest))
    return tuple(pairs)


async def _run(api_key: str | None, network: Network | None, coro_factory) -> str:
    async with EtherscanClient(api_key=api_key, network=network) as client:
        return await coro_factory(client)


def _invoke(api_key: str | None, network: Network | None, coro_factory) -> None:
    configure_logging()
    try:
        result = asyncio.run(_run(api_key, network, coro_factory))
    except (EtherscanError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    typer.echo(result)


@app.command()
def call(
    module: str = typer.Argument(..., help="API module (e.g. account)"),
    action: str = typer.Argument(..., help="API action (e.g. balance)"),
    param: list[str] = typer.Option([], "--param", "-p", help="Extra parameter as key=value"),
    network: Network | None = typer.Option(
        None, "--network", "-n", help="Target network (defaults to ETHERSCAN_NETWORK)"
    ),
    api_key: str = typer.Option(None, "--api-key", envvar="ETHERSCAN_API_KEY", help="Etherscan API key"),
):
    """Call any module/action pair."""
    params = RawQuery(pairs=parse_pairs(param))
    _invoke(api_key, network, lambda client: client.execute(module, action, params))


@app.command()
def balance(
    addresses: list[str] = typer.Argument(..., help="One or more addresses"),
    tag: str = typer.Option("latest", "--tag", help="Block tag"),
    network: Network | None = typer.Option(
        None, "--network", "-n", help="Target network (defaults to ETHERSCAN_NETWORK)"
    ),
    api_key: str = typer.Option(None, "--api-key", envvar="ETHERSCAN_API_KEY", help="Etherscan API key"),
):
    """Print the ether balance of one or more addresses, in wei."""
    if len(addresses) == 1:
        _invoke(api_key, network, lambda client: client.get_balance(addresses[0], tag=tag))
    else:
        _invoke(api_key, network, lambda client: client.get_balance_multi(addresses, tag=tag))


def main():
    # Typer reads --api-key from the environment, so .env has to be loaded first
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
