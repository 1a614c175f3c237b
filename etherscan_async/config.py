from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from etherscan_async.networks import Network


class Settings(BaseSettings):
    # Core Settings
    api_key: str | None = Field(None, description="Etherscan API key")
    network: Network = Field(Network.MAINNET, description="Target network (mainnet, goerli, sepolia)")
    timeout_seconds: float = Field(30.0, description="HTTP timeout in seconds")

    # Logging Settings
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Enable JSON logging")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ETHERSCAN_", extra="ignore")


settings = Settings()
