"""Per-transaction status records."""

from pydantic import Field

from etherscan_api.constants import ExecutionStatus, ReceiptStatus
from etherscan_api.core.coercion import U64, OptionalU64
from etherscan_api.models.account import Record


class TransactionReceiptStatus(Record):
    """Receipt status from ``transaction/gettxreceiptstatus``.

    Pre-Byzantium transactions have no receipt status; the API returns an
    empty string, decoded here as None.
    """

    status: OptionalU64

    @property
    def outcome(self) -> ReceiptStatus:
        """PASS when the receipt status is 1, FAIL otherwise."""
        if self.status == 1:
            return ReceiptStatus.PASS
        return ReceiptStatus.FAIL


class ContractExecutionStatus(Record):
    """Execution status from ``transaction/getstatus``."""

    is_error: U64 = Field(alias="isError")
    err_description: str = Field(default="", alias="errDescription")

    @property
    def outcome(self) -> ExecutionStatus:
        """PASS when ``is_error`` is 0, ERROR otherwise."""
        if self.is_error == 0:
            return ExecutionStatus.PASS
        return ExecutionStatus.ERROR
