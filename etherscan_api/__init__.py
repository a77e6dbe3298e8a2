"""Typed asynchronous client for the Etherscan API."""

from etherscan_api.client import EtherscanAPI, block_range_params
from etherscan_api.config import Settings, get_settings
from etherscan_api.constants import ExecutionStatus, ReceiptStatus, StatusCode
from etherscan_api.core.exceptions import (
    APITimeoutError,
    CoercionError,
    ConfigurationError,
    DecodeError,
    EtherscanError,
    ResponseError,
    TransportError,
)
from etherscan_api.models import (
    ContractExecutionStatus,
    ERC20TokenTransferEvent,
    ERC721TokenTransferEvent,
    Envelope,
    EthPrice,
    GasOracle,
    InternalTransaction,
    MinedBlock,
    TokenTransferEvent,
    Transaction,
    TransactionReceiptStatus,
)

__version__ = "0.1.0"

__all__ = [
    "APITimeoutError",
    "CoercionError",
    "ConfigurationError",
    "ContractExecutionStatus",
    "DecodeError",
    "ERC20TokenTransferEvent",
    "ERC721TokenTransferEvent",
    "Envelope",
    "EthPrice",
    "EtherscanAPI",
    "EtherscanError",
    "ExecutionStatus",
    "GasOracle",
    "InternalTransaction",
    "MinedBlock",
    "ReceiptStatus",
    "ResponseError",
    "Settings",
    "StatusCode",
    "TokenTransferEvent",
    "Transaction",
    "TransactionReceiptStatus",
    "TransportError",
    "block_range_params",
    "get_settings",
]
