"""
Invocation model.

One unit of work claimed from the Runtime API, parsed from the headers of a
next-invocation response.
"""

import re
from typing import Mapping, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..core import consts
from ..core.exceptions import InvocationMissingHeaderError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

HeaderSource = Union[httpx.Headers, Mapping[str, str]]


def _first(headers: httpx.Headers, name: str) -> Optional[str]:
    values = headers.get_list(name)
    return values[0] if values else None


def _parse_int64(value: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return None
    return number


class Invocation(BaseModel):
    """Immutable invocation metadata."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(..., min_length=1, description="Invocation request ID")
    deadline_in_millis_since_epoch: int = Field(
        ..., ge=_INT64_MIN, le=_INT64_MAX, description="Absolute deadline (ms since epoch)"
    )
    invoked_function_arn: str = Field(..., description="ARN of the invoked function")
    trace_id: str = Field(..., description="X-Ray trace header")
    client_context: Optional[str] = None
    cognito_identity: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: HeaderSource) -> "Invocation":
        """
        Build an Invocation from response headers.

        Required headers are checked in a fixed order (request id, deadline,
        function ARN, trace id); the first failure is reported.

        Raises:
            InvocationMissingHeaderError: a required header is absent, or the
                request id is empty, or the deadline is not an integer
        """
        if not isinstance(headers, httpx.Headers):
            headers = httpx.Headers(headers)

        request_id = _first(headers, consts.HEADER_REQUEST_ID)
        if not request_id:
            raise InvocationMissingHeaderError(consts.HEADER_REQUEST_ID)

        deadline = _first(headers, consts.HEADER_DEADLINE)
        deadline_ms = _parse_int64(deadline) if deadline is not None else None
        if deadline_ms is None:
            raise InvocationMissingHeaderError(consts.HEADER_DEADLINE)

        invoked_function_arn = _first(headers, consts.HEADER_INVOKED_FUNCTION_ARN)
        if invoked_function_arn is None:
            raise InvocationMissingHeaderError(consts.HEADER_INVOKED_FUNCTION_ARN)

        trace_id = _first(headers, consts.HEADER_TRACE_ID)
        if trace_id is None:
            raise InvocationMissingHeaderError(consts.HEADER_TRACE_ID)

        return cls(
            request_id=request_id,
            deadline_in_millis_since_epoch=deadline_ms,
            invoked_function_arn=invoked_function_arn,
            trace_id=trace_id,
            client_context=_first(headers, consts.HEADER_CLIENT_CONTEXT),
            cognito_identity=_first(headers, consts.HEADER_COGNITO_IDENTITY),
        )
