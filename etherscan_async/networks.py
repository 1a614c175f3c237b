from enum import StrEnum


class Network(StrEnum):
    """Networks served by Etherscan, each with its own API host."""

    MAINNET = "mainnet"
    GOERLI = "goerli"
    SEPOLIA = "sepolia"

    @property
    def base_url(self) -> str:
        return BASE_URLS[self]


BASE_URLS: dict[Network, str] = {
    Network.MAINNET: "https://api.etherscan.io/api",
    Network.GOERLI: "https://api-goerli.etherscan.io/api",
    Network.SEPOLIA: "https://api-sepolia.etherscan.io/api",
}
