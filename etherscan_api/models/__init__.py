"""Domain models package."""

from etherscan_api.models.account import (
    ERC20TokenTransferEvent,
    ERC721TokenTransferEvent,
    InternalTransaction,
    MinedBlock,
    Record,
    TokenTransferEvent,
    Transaction,
)
from etherscan_api.models.envelope import Envelope
from etherscan_api.models.stats import EthPrice, GasOracle
from etherscan_api.models.transaction import (
    ContractExecutionStatus,
    TransactionReceiptStatus,
)

__all__ = [
    "ContractExecutionStatus",
    "ERC20TokenTransferEvent",
    "ERC721TokenTransferEvent",
    "Envelope",
    "EthPrice",
    "GasOracle",
    "InternalTransaction",
    "MinedBlock",
    "Record",
    "TokenTransferEvent",
    "Transaction",
    "TransactionReceiptStatus",
]
