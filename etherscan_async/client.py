import logging

import httpx

from etherscan_async.config import settings
from etherscan_async.dispatcher import Dispatcher
from etherscan_async.endpoints import (
    AccountsAPI,
    BlocksAPI,
    ContractsAPI,
    GasTrackerAPI,
    LogsAPI,
    ProxyAPI,
    StatsAPI,
    TokensAPI,
    TransactionsAPI,
)
from etherscan_async.networks import Network

logger = logging.getLogger(__name__)


class EtherscanClient(
    AccountsAPI,
    ContractsAPI,
    TransactionsAPI,
    BlocksAPI,
    LogsAPI,
    ProxyAPI,
    TokensAPI,
    GasTrackerAPI,
    StatsAPI,
    Dispatcher,
):
    """Async client for the Etherscan API.

    Every endpoint method returns the response's ``result`` field as a string.
    The client holds no mutable state and can be shared between concurrent tasks.
    """

    def __init__(
        self,
        api_key: str | None = None,
        network: Network | str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("ETHERSCAN_API_KEY is not set.")

        super().__init__(
            api_key=api_key,
            network=Network(network or settings.network),
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
        )
        logger.debug(f"Etherscan client ready for {self.base_url}")
