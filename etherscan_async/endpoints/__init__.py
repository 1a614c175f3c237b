"""Endpoint groups, one mixin per Etherscan API module.

Each mixin relies on ``execute`` from :class:`etherscan_async.dispatcher.Dispatcher`.
"""

from etherscan_async.endpoints.accounts import AccountsAPI
from etherscan_async.endpoints.blocks import BlocksAPI
from etherscan_async.endpoints.contracts import ContractsAPI
from etherscan_async.endpoints.gastracker import GasTrackerAPI
from etherscan_async.endpoints.logs import LogsAPI
from etherscan_async.endpoints.proxy import ProxyAPI
from etherscan_async.endpoints.stats import StatsAPI
from etherscan_async.endpoints.tokens import TokensAPI
from etherscan_async.endpoints.transactions import TransactionsAPI

__all__ = [
    "AccountsAPI",
    "BlocksAPI",
    "ContractsAPI",
    "GasTrackerAPI",
    "LogsAPI",
    "ProxyAPI",
    "StatsAPI",
    "TokensAPI",
    "TransactionsAPI",
]
