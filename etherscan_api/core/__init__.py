"""Core module for errors and value coercion."""

from etherscan_api.core.coercion import parse_float, parse_u128, parse_uint
from etherscan_api.core.exceptions import (
    APITimeoutError,
    CoercionError,
    ConfigurationError,
    DecodeError,
    EtherscanError,
    ResponseError,
    TransportError,
)

__all__ = [
    "APITimeoutError",
    "CoercionError",
    "ConfigurationError",
    "DecodeError",
    "EtherscanError",
    "ResponseError",
    "TransportError",
    "parse_float",
    "parse_u128",
    "parse_uint",
]
