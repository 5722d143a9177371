"""
Error payload model.

Body of the invocation-error and init-error reports.
"""

import json
from dataclasses import dataclass
from typing import Union

from ..core.exceptions import JsonEncodingError


@dataclass(frozen=True)
class ErrorResponse:
    """Runtime API error body: {"errorType": ..., "errorMessage": ...}."""

    error_type: str
    error_message: str

    @classmethod
    def from_exception(cls, error_type: str, error: BaseException) -> "ErrorResponse":
        return cls(error_type=error_type, error_message=str(error) or type(error).__name__)

    def to_json(self) -> bytes:
        """
        Serialize to UTF-8 JSON bytes.

        Raises:
            JsonEncodingError: the payload cannot be encoded
        """
        try:
            return json.dumps(
                {"errorType": self.error_type, "errorMessage": self.error_message},
                ensure_ascii=False,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise JsonEncodingError(e) from e

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "ErrorResponse":
        obj = json.loads(data)
        return cls(error_type=obj["errorType"], error_message=obj["errorMessage"])
