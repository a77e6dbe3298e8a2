"""Etherscan API client implementation."""

import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from etherscan_api.config import Settings, get_settings
from etherscan_api.constants import API_TOKEN_ENV, BASE_URL, SortOrder
from etherscan_api.core.coercion import parse_u128
from etherscan_api.core.exceptions import (
    APITimeoutError,
    ConfigurationError,
    DecodeError,
    ResponseError,
    TransportError,
)
from etherscan_api.models.account import (
    ERC20TokenTransferEvent,
    ERC721TokenTransferEvent,
    InternalTransaction,
    MinedBlock,
    Transaction,
)
from etherscan_api.models.envelope import Envelope
from etherscan_api.models.stats import EthPrice, GasOracle
from etherscan_api.models.transaction import (
    ContractExecutionStatus,
    TransactionReceiptStatus,
)

logger = logging.getLogger(__name__)


@lru_cache
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def block_range_params(start_block: int, end_block: int) -> dict[str, int]:
    """
    Build the optional block range filter.

    An ``end_block`` of 0 means "no range filter", not block height zero.
    """
    if end_block == 0:
        return {}
    return {"startblock": start_block, "endblock": end_block}


class EtherscanAPI:
    """
    Asynchronous client for the Etherscan HTTP API.

    One instance holds the API token and a reusable ``httpx.AsyncClient``.
    Nothing is mutated after construction, so a single instance can serve
    concurrent calls.

    Every endpoint raises:
        TransportError: If the HTTP exchange fails (APITimeoutError on timeout).
        DecodeError: If the response does not have the expected shape.
        ResponseError: If the API reports an error status.
    Endpoints returning a bare number additionally raise CoercionError when
    the payload is not an unsigned 128-bit integer.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        strict_status: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_token: Etherscan API key.
            base_url: API endpoint.
            timeout: Request timeout in seconds, used when the client
                creates its own transport.
            strict_status: Treat unrecognized envelope status codes as
                decode errors instead of passing the payload through.
            client: Transport to use. The caller keeps ownership of an
                injected client and is responsible for closing it.
        """
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._strict_status = strict_status
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": "etherscan-api/0.1",
            },
        )

    @classmethod
    def from_env(
        cls,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "EtherscanAPI":
        """
        Create a client from settings, reading the token from the environment.

        Raises:
            ConfigurationError: If ETHERSCANIO_API_TOKEN is not set.
        """
        settings = settings or get_settings()
        if settings.etherscanio_api_token is None:
            logger.error(f"[Etherscan API] {API_TOKEN_ENV} is not set")
            raise ConfigurationError(API_TOKEN_ENV)
        return cls(
            settings.etherscanio_api_token.get_secret_value(),
            base_url=settings.etherscan_base_url,
            timeout=settings.etherscan_timeout,
            strict_status=settings.etherscan_strict_status,
            client=client,
        )

    async def __aenter__(self) -> "EtherscanAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(
        self,
        module: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue a GET request and return the parsed JSON body.

        Raises:
            APITimeoutError: If the request times out.
            TransportError: On connection failures and non-2xx responses.
            DecodeError: If the body is not valid JSON.
        """
        query_params = {"module": module, "action": action, **(params or {})}
        logger.info(f"[Etherscan API] GET {module}/{action}")
        logger.debug(f"[Etherscan API] Query params: {query_params}")
        query_params["apikey"] = self._api_token

        try:
            response = await self._client.get(self._base_url, params=query_params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"[Etherscan API] Request timeout for {module}/{action}")
            raise APITimeoutError(self._base_url, self._timeout) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"[Etherscan API] HTTP error {status_code} for {module}/{action}")
            raise TransportError(
                f"HTTP error {status_code} for {module}/{action}", self._base_url
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"[Etherscan API] Request failed for {module}/{action}: {type(e).__name__}")
            raise TransportError(
                f"Request failed for {module}/{action}: {type(e).__name__}",
                self._base_url,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"[Etherscan API] Invalid JSON body for {module}/{action}")
            raise DecodeError(
                f"Response body for {module}/{action} is not valid JSON",
                response.text,
            ) from e

    async def _fetch(
        self,
        module: str,
        action: str,
        params: dict[str, Any] | None,
        result_type: Any,
    ) -> Any:
        """Request an endpoint, unwrap its envelope and decode the payload."""
        body = await self._request(module, action, params)

        try:
            envelope = Envelope[Any].model_validate(body)
        except ValidationError as e:
            logger.error(f"[Etherscan API] Malformed envelope for {module}/{action}")
            raise DecodeError(
                f"Malformed response envelope for {module}/{action}: {e}", body
            ) from e

        try:
            result = envelope.result_or_error(strict=self._strict_status)
        except ResponseError as e:
            logger.warning(f"[Etherscan API] {module}/{action} returned error: {e.message}")
            raise

        try:
            return _adapter(result_type).validate_python(result)
        except ValidationError as e:
            logger.error(f"[Etherscan API] Unexpected payload for {module}/{action}")
            raise DecodeError(
                f"Unexpected payload for {module}/{action}: {e}", result
            ) from e

    async def _fetch_u128(
        self,
        module: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> int:
        result = await self._fetch(module, action, params, str)
        return parse_u128(result)

    async def account_balance(self, address: str) -> int:
        """Get the ether balance of an account, in wei."""
        return await self._fetch_u128(
            "account", "balance", {"address": address, "tag": "latest"}
        )

    async def estimate_confirmation_time(self, gas_price: int) -> int:
        """Estimate the confirmation time in seconds for a gas price in wei."""
        return await self._fetch_u128(
            "gastracker", "gasestimate", {"gasprice": gas_price}
        )

    async def gas_oracle(self) -> GasOracle:
        """Get the current safe and proposed gas prices."""
        return await self._fetch("gastracker", "gasoracle", None, GasOracle)

    async def eth_price(self) -> EthPrice:
        """Get the last ether price in BTC and USD."""
        return await self._fetch("stats", "ethprice", None, EthPrice)

    async def erc20_token_total_supply(self, contract_address: str) -> int:
        """Get the total supply of an ERC-20 token, in its smallest unit."""
        return await self._fetch_u128(
            "stats", "tokensupply", {"contractaddress": contract_address}
        )

    async def erc20_token_balance(
        self, address: str, contract_address: str
    ) -> int:
        """Get the ERC-20 token balance of an account, in the token's smallest unit."""
        return await self._fetch_u128(
            "account",
            "tokenbalance",
            {
                "contractaddress": contract_address,
                "address": address,
                "tag": "latest",
            },
        )

    async def transactions(
        self, address: str, start_block: int = 0, end_block: int = 0
    ) -> list[Transaction]:
        """
        List normal transactions of an account in ascending block order.

        Args:
            address: Account address.
            start_block: First block of the range filter.
            end_block: Last block of the range filter; 0 disables the filter.
        """
        params = {
            "address": address,
            **block_range_params(start_block, end_block),
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch("account", "txlist", params, list[Transaction])

    async def internal_transactions(
        self, address: str, start_block: int = 0, end_block: int = 0
    ) -> list[InternalTransaction]:
        """List internal transactions of an account in ascending block order."""
        params = {
            "address": address,
            **block_range_params(start_block, end_block),
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "txlistinternal", params, list[InternalTransaction]
        )

    async def internal_transactions_in_range(
        self, start_block: int, end_block: int
    ) -> list[InternalTransaction]:
        """List internal transactions within a block range (first page of 10)."""
        params = {
            **block_range_params(start_block, end_block),
            "page": 1,
            "offset": 10,
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "txlistinternal", params, list[InternalTransaction]
        )

    async def internal_transactions_by_hash(
        self, tx_hash: str
    ) -> list[InternalTransaction]:
        """List internal transactions created by one transaction."""
        return await self._fetch(
            "account",
            "txlistinternal",
            {"txhash": tx_hash},
            list[InternalTransaction],
        )

    async def erc20_transfers(
        self, address: str, start_block: int = 0, end_block: int = 0
    ) -> list[ERC20TokenTransferEvent]:
        """List ERC-20 transfer events of an account."""
        params = {
            "address": address,
            **block_range_params(start_block, end_block),
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "tokentx", params, list[ERC20TokenTransferEvent]
        )

    async def erc20_transfers_by_contract(
        self, address: str, contract_address: str
    ) -> list[ERC20TokenTransferEvent]:
        """List ERC-20 transfer events of an account for one token contract."""
        params = {
            "contractaddress": contract_address,
            "address": address,
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "tokentx", params, list[ERC20TokenTransferEvent]
        )

    async def erc721_transfers(
        self, address: str, start_block: int = 0, end_block: int = 0
    ) -> list[ERC721TokenTransferEvent]:
        """List ERC-721 transfer events of an account."""
        params = {
            "address": address,
            **block_range_params(start_block, end_block),
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "tokennfttx", params, list[ERC721TokenTransferEvent]
        )

    async def erc721_transfers_by_contract(
        self, address: str, contract_address: str
    ) -> list[ERC721TokenTransferEvent]:
        """List ERC-721 transfer events of an account for one token contract."""
        params = {
            "contractaddress": contract_address,
            "address": address,
            "sort": SortOrder.ASC.value,
        }
        return await self._fetch(
            "account", "tokennfttx", params, list[ERC721TokenTransferEvent]
        )

    async def mined_blocks(self, address: str) -> list[MinedBlock]:
        """List blocks validated by an address."""
        params = {"address": address, "blocktype": "blocks"}
        return await self._fetch(
            "account", "getminedblocks", params, list[MinedBlock]
        )

    async def contract_execution_status(
        self, tx_hash: str
    ) -> ContractExecutionStatus:
        """Get the contract execution status of a transaction."""
        return await self._fetch(
            "transaction", "getstatus", {"txhash": tx_hash}, ContractExecutionStatus
        )

    async def transaction_receipt_status(
        self, tx_hash: str
    ) -> TransactionReceiptStatus:
        """Get the receipt status of a transaction."""
        return await self._fetch(
            "transaction",
            "gettxreceiptstatus",
            {"txhash": tx_hash},
            TransactionReceiptStatus,
        )
