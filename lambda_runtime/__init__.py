"""
Lambda Runtime API client package.

Exposes the client, its result/error types and the worker runner.
"""

from .client import RuntimeClient
from .config import RuntimeConfig
from .core.exceptions import (
    BadStatusCodeError,
    InvocationMissingHeaderError,
    JsonEncodingError,
    LambdaRuntimeError,
    NoBodyError,
    UpstreamError,
)
from .core.result import Result
from .models import ErrorResponse, Invocation
from .runner import LambdaContext, LambdaRunner, run

__all__ = [
    "RuntimeClient",
    "RuntimeConfig",
    "BadStatusCodeError",
    "InvocationMissingHeaderError",
    "JsonEncodingError",
    "LambdaRuntimeError",
    "NoBodyError",
    "UpstreamError",
    "Result",
    "ErrorResponse",
    "Invocation",
    "LambdaContext",
    "LambdaRunner",
    "run",
]
