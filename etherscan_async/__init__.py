"""Async client for the Etherscan blockchain data API."""

from etherscan_async.client import EtherscanClient
from etherscan_async.dispatcher import Dispatcher, ResponseEnvelope
from etherscan_async.errors import EtherscanError, EtherscanRequestError, TopicChainError
from etherscan_async.networks import Network
from etherscan_async.params import QueryParams, TopicChain, join_addresses, to_hex, topic_chain

__all__ = [
    "Dispatcher",
    "EtherscanClient",
    "EtherscanError",
    "EtherscanRequestError",
    "Network",
    "QueryParams",
    "ResponseEnvelope",
    "TopicChain",
    "TopicChainError",
    "join_addresses",
    "to_hex",
    "topic_chain",
]
