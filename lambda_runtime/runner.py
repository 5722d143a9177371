"""
Lambda Runner

Drives a RuntimeClient through the worker lifecycle:
initialize the handler once, then loop next-invocation -> handler -> report.

Handlers follow the usual Lambda signature ``handler(event, context)`` where
``event`` is the raw payload bytes. They may be plain functions or coroutines
and may return bytes, str or None.
"""

import asyncio
import inspect
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from .client import RuntimeClient
from .config import RuntimeConfig
from .core import consts, request_context
from .core.http_client import HttpClientFactory
from .core.logging_config import setup_logging
from .core.result import Result
from .models.invocation import Invocation

logger = logging.getLogger("lambda_runtime.runner")

HandlerReturn = Union[bytes, str, None]
Handler = Callable[[bytes, "LambdaContext"], Union[HandlerReturn, Awaitable[HandlerReturn]]]
HandlerFactory = Callable[[], Union[Handler, Awaitable[Handler]]]


@dataclass(frozen=True)
class LambdaContext:
    """Per-invocation context handed to the handler."""

    aws_request_id: str
    deadline_ms: int
    invoked_function_arn: str
    trace_id: str
    client_context: Optional[str] = None
    cognito_identity: Optional[str] = None

    @classmethod
    def from_invocation(cls, invocation: Invocation) -> "LambdaContext":
        return cls(
            aws_request_id=invocation.request_id,
            deadline_ms=invocation.deadline_in_millis_since_epoch,
            invoked_function_arn=invocation.invoked_function_arn,
            trace_id=invocation.trace_id,
            client_context=invocation.client_context,
            cognito_identity=invocation.cognito_identity,
        )

    def get_remaining_time_in_millis(self) -> int:
        # Informational only; the deadline is not enforced here.
        return max(self.deadline_ms - int(time.time() * 1000), 0)


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _to_bytes(value: HandlerReturn) -> Optional[bytes]:
    if value is None or isinstance(value, bytes):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Handler returned unsupported type: {type(value).__name__}")


class LambdaRunner:
    def __init__(self, client: RuntimeClient, config: Optional[RuntimeConfig] = None):
        self.client = client
        self.config = config or RuntimeConfig()

    async def initialize(self, handler_factory: HandlerFactory) -> Result[Handler]:
        """
        Build the handler. A factory failure is reported to /init/error and
        returned as a failed Result.
        """
        try:
            handler = await _maybe_await(handler_factory())
        except Exception as e:
            logger.error(f"Handler initialization failed: {e}", exc_info=True)
            reported = await self.client.report_initialization_error(e)
            if not reported.is_success:
                logger.error(f"Failed to report initialization error: {reported.error}")
            return Result.failure(e)
        return Result.success(handler)

    async def run_once(self, handler: Handler) -> Result[None]:
        """Run one next-invocation -> handler -> report cycle."""
        work = await self.client.request_work()
        if not work.is_success:
            # A payload claimed with invalid headers cannot be acknowledged.
            return Result.failure(work.error)

        invocation, event = work.value
        context = LambdaContext.from_invocation(invocation)

        request_context.set_request_id(invocation.request_id)
        if request_context.set_trace_id(invocation.trace_id):
            os.environ[consts.TRACE_ID_ENV] = invocation.trace_id
        else:
            os.environ.pop(consts.TRACE_ID_ENV, None)
        try:
            try:
                outcome = Result.success(_to_bytes(await _maybe_await(handler(event, context))))
            except Exception as e:
                logger.error(f"Handler failed: {e}", exc_info=True)
                outcome = Result.failure(e)
            return await self.client.report_results(invocation, outcome)
        finally:
            request_context.clear_context()
            os.environ.pop(consts.TRACE_ID_ENV, None)

    async def run(self, handler_factory: HandlerFactory) -> Result[int]:
        """
        Initialize, then process invocations until a cycle fails or
        MAX_INVOCATIONS is reached.

        Returns:
            The number of completed invocations, or the terminating error
        """
        init = await self.initialize(handler_factory)
        if not init.is_success:
            return Result.failure(init.error)
        handler = init.value

        count = 0
        max_invocations = self.config.MAX_INVOCATIONS
        while max_invocations == 0 or count < max_invocations:
            cycle = await self.run_once(handler)
            if not cycle.is_success:
                logger.error(
                    f"Stopping runner after {count} invocations: {cycle.error}",
                    extra={"error_type": type(cycle.error).__name__},
                )
                return Result.failure(cycle.error)
            count += 1

        logger.info(f"Runner finished after {count} invocations")
        return Result.success(count)


async def _run(handler_factory: HandlerFactory, config: RuntimeConfig) -> Result[int]:
    factory = HttpClientFactory(config)
    async with factory.create_async_client() as http:
        runner = LambdaRunner(RuntimeClient(http), config)
        return await runner.run(handler_factory)


def run(handler_factory: HandlerFactory, config: Optional[RuntimeConfig] = None) -> Result[int]:
    """
    Process entrypoint: configure logging and the transport, then run the loop.
    """
    config = config or RuntimeConfig()
    setup_logging(config.LOGGING_CONFIG_PATH, config.LOG_LEVEL)
    logger.info(f"Starting lambda runtime against {config.runtime_api_base_url}")
    return asyncio.run(_run(handler_factory, config))
