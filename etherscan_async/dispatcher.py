import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from etherscan_async.config import settings
from etherscan_async.errors import EtherscanRequestError
from etherscan_async.networks import Network
from etherscan_async.params import BASE_FIELDS, EmptyQuery, QueryParams

logger = logging.getLogger(__name__)


class BaseRequest(BaseModel):
    """Fields sent with every call, ahead of the endpoint parameters."""

    model_config = ConfigDict(frozen=True, strict=True)

    module: str
    action: str
    apikey: str

    def to_query(self) -> list[tuple[str, str]]:
        return [(name, getattr(self, name)) for name in BASE_FIELDS]


class ResponseEnvelope(BaseModel):
    """The ``{status, result}`` wrapper around every Etherscan response."""

    model_config = ConfigDict(strict=True, extra="ignore")

    status: str
    result: str


class Dispatcher:
    """Sends one GET per call and unwraps the response envelope."""

    def __init__(
        self,
        api_key: str,
        network: Network = Network.MAINNET,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url or Network(network).base_url
        self.client = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.timeout_seconds,
            follow_redirects=True,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def build_query(self, module: str, action: str, params: QueryParams | None = None) -> list[tuple[str, str]]:
        """Base fields first, then the endpoint fields."""
        base = BaseRequest(module=module, action=action, apikey=self.api_key)
        return base.to_query() + (params or EmptyQuery()).to_query()

    async def execute(self, module: str, action: str, params: QueryParams | None = None) -> str:
        """
        Call a remote operation and return the envelope's result.

        Args:
            module: Remote module (e.g. 'account').
            action: Remote action within the module (e.g. 'balance').
            params: Endpoint parameters; None for parameterless endpoints.

        Returns:
            The ``result`` field verbatim. ``status`` is not inspected.

        Raises:
            EtherscanRequestError: If the request fails or the body is not a valid envelope.
        """
        query = self.build_query(module, action, params)
        props = {"module": module, "action": action}
        logger.debug(
            f"GET {module}/{action} with {len(query) - len(BASE_FIELDS)} endpoint parameters",
            extra={"props": {**props, "event": "request"}},
        )

        try:
            response = await self.client.get(self.base_url, params=query)
            response.raise_for_status()
            envelope = ResponseEnvelope.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"HTTP error for {module}/{action}: {status_code}",
                extra={"props": {**props, "event": "failure", "status_code": status_code}},
            )
            raise EtherscanRequestError(module, action, f"HTTP error: {status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request failed for {module}/{action}: {e}", extra={"props": {**props, "event": "failure"}})
            raise EtherscanRequestError(module, action, f"Request failed: {e}") from e
        except ValidationError as e:
            logger.error(
                f"Invalid response envelope for {module}/{action}: {e}", extra={"props": {**props, "event": "failure"}}
            )
            raise EtherscanRequestError(module, action, f"Invalid response envelope: {e}") from e
        except ValueError as e:
            # JSONDecodeError, or UnicodeDecodeError for a body that is not UTF-8
            logger.error(
                f"Failed to decode JSON for {module}/{action}: {e}", extra={"props": {**props, "event": "failure"}}
            )
            raise EtherscanRequestError(module, action, f"JSON decode error: {e}") from e

        logger.debug(
            f"{module}/{action} returned status {envelope.status}",
            extra={"props": {**props, "event": "response", "status": envelope.status}},
        )
        return envelope.result
