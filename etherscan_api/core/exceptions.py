"""Custom exceptions for the Etherscan client."""

from typing import Any

from etherscan_api.constants import StatusCode


class EtherscanError(Exception):
    """Base exception for all Etherscan client errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or "ETHERSCAN_ERROR"
        super().__init__(self.message)


class ConfigurationError(EtherscanError):
    """Raised when required configuration (the API token) is missing."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(
            f"Missing required setting: {setting}", "CONFIGURATION_ERROR"
        )


class TransportError(EtherscanError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message, "TRANSPORT_ERROR")


class APITimeoutError(TransportError):
    """Raised when an API request times out."""

    def __init__(self, url: str, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"API timeout for {url} after {timeout}s", url)
        self.code = "API_TIMEOUT"


class DecodeError(EtherscanError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, body: Any = None) -> None:
        self.body = body
        super().__init__(message, "DECODE_ERROR")


class ResponseError(EtherscanError):
    """Raised when the API reports a failure status in the envelope.

    The API frequently returns a well-formed payload alongside the error
    status (an empty list, an error string, a zero balance), so the raw
    ``result`` is kept for the caller to inspect.
    """

    def __init__(self, status: StatusCode, message: str, result: Any) -> None:
        self.status = status
        self.result = result
        super().__init__(
            f"response error with status {status.value}, "
            f"message: {message}, result: {result!r}",
            "RESPONSE_ERROR",
        )
        self.message = message


class CoercionError(EtherscanError, ValueError):
    """Raised when a string value cannot be converted to a numeric type."""

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert {value!r} to {target}", "COERCION_ERROR")
