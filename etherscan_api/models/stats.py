"""Network-wide snapshots: gas oracle and ether price."""

from pydantic import Field

from etherscan_api.core.coercion import U64, U128, Float
from etherscan_api.models.account import Record


class GasOracle(Record):
    """Current safe and proposed gas prices, in gwei."""

    last_block: U128 = Field(alias="LastBlock")
    safe_gas_price: U128 = Field(alias="SafeGasPrice")
    propose_gas_price: U128 = Field(alias="ProposeGasPrice")


class EthPrice(Record):
    """Last ether price in BTC and USD."""

    eth_btc: Float = Field(alias="ethbtc")
    eth_btc_timestamp: U64 = Field(alias="ethbtc_timestamp")
    eth_usd: Float = Field(alias="ethusd")
    eth_usd_timestamp: U64 = Field(alias="ethusd_timestamp")
