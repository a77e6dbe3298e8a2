"""Account-level records: transactions, token transfers and mined blocks."""

from pydantic import BaseModel, ConfigDict, Field

from etherscan_api.core.coercion import U64, U128, OptionalU64


class Record(BaseModel):
    """Base for immutable records decoded from API payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Transaction(Record):
    """Normal transaction returned by ``account/txlist``."""

    block_number: U64 = Field(alias="blockNumber")
    timestamp: U64 = Field(alias="timeStamp")
    hash: str
    nonce: U64
    block_hash: str = Field(alias="blockHash")
    transaction_index: U64 = Field(alias="transactionIndex")
    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    value: U128
    gas: U128
    gas_price: U128 = Field(alias="gasPrice")
    is_error: str = Field(alias="isError")
    tx_receipt_status: str = Field(alias="txreceipt_status")
    input: str
    contract_address: str = Field(alias="contractAddress")
    cumulative_gas_used: U64 = Field(alias="cumulativeGasUsed")
    gas_used: U64 = Field(alias="gasUsed")
    confirmations: U64


class InternalTransaction(Record):
    """Internal (message call) transaction returned by ``account/txlistinternal``.

    Lookups by transaction hash omit ``hash`` and ``traceId``.
    """

    block_number: U64 = Field(alias="blockNumber")
    timestamp: U64 = Field(alias="timeStamp")
    hash: str = ""
    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    value: U128
    contract_address: str = Field(alias="contractAddress")
    input: str
    tx_type: str = Field(alias="type")
    gas: U64
    gas_used: U64 = Field(alias="gasUsed")
    trace_id: OptionalU64 = Field(default=None, alias="traceId")
    is_error: str = Field(alias="isError")
    err_code: str = Field(alias="errCode")


class TokenTransferEvent(Record):
    """Token transfer event, shared by the ERC-20 and ERC-721 endpoints.

    ERC-721 events carry ``tokenID`` instead of ``value``.
    """

    block_number: U64 = Field(alias="blockNumber")
    timestamp: U64 = Field(alias="timeStamp")
    hash: str
    nonce: U64
    block_hash: str = Field(alias="blockHash")
    from_address: str = Field(alias="from")
    contract_address: str = Field(alias="contractAddress")
    to_address: str = Field(alias="to")
    value: U128 = 0
    token_id: str | None = Field(default=None, alias="tokenID")
    token_name: str = Field(alias="tokenName")
    token_symbol: str = Field(alias="tokenSymbol")
    token_decimal: U64 = Field(alias="tokenDecimal")
    transaction_index: U64 = Field(alias="transactionIndex")
    gas: U64
    gas_price: U128 = Field(alias="gasPrice")
    gas_used: U64 = Field(alias="gasUsed")
    cumulative_gas_used: U64 = Field(alias="cumulativeGasUsed")
    input: str
    confirmations: U64


ERC20TokenTransferEvent = TokenTransferEvent
ERC721TokenTransferEvent = TokenTransferEvent


class MinedBlock(Record):
    """Block validated by an address, from ``account/getminedblocks``."""

    block_number: U64 = Field(alias="blockNumber")
    timestamp: U64 = Field(alias="timeStamp")
    block_reward: U128 = Field(alias="blockReward")
