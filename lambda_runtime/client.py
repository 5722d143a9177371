"""
Runtime API Client

Talks to the Lambda Runtime API on behalf of one worker process:
- GET  /runtime/invocation/next
- POST /runtime/invocation/{request_id}/response
- POST /runtime/invocation/{request_id}/error
- POST /runtime/init/error

Every call is a single request/response exchange. Failures are returned as
Result values, never raised, and nothing is retried here.
"""

import logging
from typing import Optional, Tuple

import httpx

from .core import consts
from .core.exceptions import (
    BadStatusCodeError,
    JsonEncodingError,
    LambdaRuntimeError,
    NoBodyError,
    UpstreamError,
)
from .core.result import Result
from .models.error_response import ErrorResponse
from .models.invocation import Invocation

logger = logging.getLogger("lambda_runtime.client")

_JSON_HEADERS = {"Content-Type": "application/json"}


def _is_connection_reset(error: Exception) -> bool:
    if not isinstance(error, (httpx.NetworkError, httpx.RemoteProtocolError)):
        return False

    seen = set()
    cause: Optional[BaseException] = error
    while cause is not None and id(cause) not in seen:
        if isinstance(cause, ConnectionResetError):
            return True
        seen.add(id(cause))
        cause = cause.__cause__ or cause.__context__

    message = str(error).lower()
    return "connection reset" in message or "server disconnected" in message


def translate_transport_error(error: Exception) -> Exception:
    """
    Map a transport failure to the error surfaced to callers.

    Timeouts and connection resets become UpstreamError; anything else is
    returned unchanged.
    """
    if isinstance(error, httpx.TimeoutException):
        return UpstreamError(consts.UPSTREAM_TIMEOUT)
    if _is_connection_reset(error):
        return UpstreamError(consts.UPSTREAM_CONNECTION_RESET)
    return error


class RuntimeClient:
    """
    HTTP based client for the Lambda Runtime API.

    Not safe for overlapping calls: issue one operation at a time per instance.
    """

    def __init__(self, client: httpx.AsyncClient):
        """
        Args:
            client: httpx.AsyncClient whose base_url points at the Runtime API
        """
        self.client = client

    async def request_work(self) -> Result[Tuple[Invocation, bytes]]:
        """Request the next invocation from the Runtime API."""
        url = consts.INVOCATION_URL_PREFIX + consts.REQUEST_WORK_URL_SUFFIX
        logger.debug(f"requesting work from lambda runtime engine using {url}")

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            return Result.failure(self._transport_failure(e, url))

        try:
            if response.status_code != 200:
                raise BadStatusCodeError(response.status_code)
            invocation = Invocation.from_headers(response.headers)
            if not response.content:
                raise NoBodyError()
        except LambdaRuntimeError as e:
            logger.warning(f"Invalid next-invocation response: {e}", extra={"target_url": url})
            return Result.failure(e)

        return Result.success((invocation, response.content))

    async def report_results(
        self, invocation: Invocation, result: Result[Optional[bytes]]
    ) -> Result[None]:
        """
        Report the outcome of an invocation.

        Args:
            invocation: The invocation being answered
            result: Success with the response payload, or failure with the handler error
        """
        url = f"{consts.INVOCATION_URL_PREFIX}/{invocation.request_id}"
        headers = None
        if result.is_success:
            url += consts.POST_RESPONSE_URL_SUFFIX
            body = result.value or b""
        else:
            url += consts.POST_ERROR_URL_SUFFIX
            try:
                body = ErrorResponse.from_exception(consts.FUNCTION_ERROR, result.error).to_json()
            except JsonEncodingError as e:
                logger.error(f"Not reporting invocation error: {e}")
                return Result.failure(e)
            headers = _JSON_HEADERS

        logger.debug(f"reporting results to lambda runtime engine using {url}")
        return await self._post(url, body, headers)

    async def report_initialization_error(self, error: BaseException) -> Result[None]:
        """Report a startup failure; only valid before the first request_work."""
        url = consts.POST_INIT_ERROR_URL
        try:
            body = ErrorResponse.from_exception(consts.INITIALIZATION_ERROR, error).to_json()
        except JsonEncodingError as e:
            logger.error(f"Not reporting initialization error: {e}")
            return Result.failure(e)

        logger.warning(f"reporting initialization error to lambda runtime engine using {url}")
        return await self._post(url, body, _JSON_HEADERS)

    async def _post(self, url: str, body: bytes, headers: Optional[dict]) -> Result[None]:
        try:
            response = await self.client.post(url, content=body, headers=headers)
        except httpx.HTTPError as e:
            return Result.failure(self._transport_failure(e, url))

        if response.status_code != 202:
            error = BadStatusCodeError(response.status_code)
            logger.warning(f"Report rejected by Runtime API: {error}", extra={"target_url": url})
            return Result.failure(error)
        return Result.success()

    def _transport_failure(self, error: httpx.HTTPError, url: str) -> Exception:
        translated = translate_transport_error(error)
        logger.error(
            "Runtime API request failed",
            extra={
                "target_url": url,
                "error_type": type(error).__name__,
                "error_detail": str(error),
            },
        )
        return translated
