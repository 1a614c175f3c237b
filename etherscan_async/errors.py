"""Exceptions raised by the Etherscan client."""


class EtherscanError(Exception):
    """Base class for all client errors."""


class EtherscanRequestError(EtherscanError):
    """Raised when a call cannot be completed or its response cannot be decoded."""

    def __init__(self, module: str, action: str, message: str):
        self.module = module
        self.action = action
        self.message = message
        super().__init__(f"[{module}/{action}] {message}")


class TopicChainError(EtherscanError, ValueError):
    """Raised when log topics are supplied out of order."""

    pass
