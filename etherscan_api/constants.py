"""Client constants and status enumerations."""

from enum import Enum
from typing import Any

BASE_URL = "https://api.etherscan.io/api"

# Environment variable holding the API token
API_TOKEN_ENV = "ETHERSCANIO_API_TOKEN"

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class StatusCode(str, Enum):
    """Tri-state classification of the envelope ``status`` field."""

    OK = "ok"
    ERROR = "error"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "StatusCode":
        """Classify a raw status value. Never raises."""
        if isinstance(value, cls):
            return value
        if value == "1":
            return cls.OK
        if value == "0":
            return cls.ERROR
        return cls.UNKNOWN


class SortOrder(str, Enum):
    """Sort order accepted by the list endpoints."""

    ASC = "asc"
    DESC = "desc"


class ReceiptStatus(str, Enum):
    """Outcome of a transaction receipt status lookup."""

    PASS = "pass"
    FAIL = "fail"


class ExecutionStatus(str, Enum):
    """Outcome of a contract execution status lookup."""

    PASS = "pass"
    ERROR = "error"
