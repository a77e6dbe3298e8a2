"""Generic response envelope returned by every endpoint."""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from etherscan_api.constants import StatusCode
from etherscan_api.core.exceptions import DecodeError, ResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wrapper of the form ``{"status": ..., "message": ..., "result": ...}``."""

    model_config = ConfigDict(frozen=True)

    status: StatusCode
    message: str = ""
    result: T

    @field_validator("status", mode="before")
    @classmethod
    def classify_status(cls, v: Any) -> StatusCode:
        """Map "1" to OK, "0" to ERROR and anything else to UNKNOWN."""
        return StatusCode.parse(v)

    def result_or_error(self, strict: bool = False) -> T:
        """
        Unwrap the payload.

        Args:
            strict: Reject envelopes with an unrecognized status instead of
                passing their payload through.

        Returns:
            The ``result`` payload when the status is OK (or UNKNOWN and not
            strict).

        Raises:
            ResponseError: If the API reported an error status.
            DecodeError: If ``strict`` is set and the status is UNKNOWN.
        """
        if self.status is StatusCode.ERROR:
            raise ResponseError(self.status, self.message, self.result)
        if self.status is StatusCode.UNKNOWN:
            if strict:
                raise DecodeError(
                    f"Unrecognized response status (message: {self.message})",
                    self.result,
                )
            logger.debug(f"[Envelope] Unrecognized status, passing result through: {self.message}")
        return self.result
