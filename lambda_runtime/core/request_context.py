"""
RequestContext management.
Use ContextVar to expose the current invocation to logging.
"""

from contextvars import ContextVar
from typing import Optional


# Context variable for the Trace ID header, stored verbatim.
_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)
# Context variable for the invocation Request ID.
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_trace_id() -> Optional[str]:
    """Get the current Trace ID."""
    return _trace_id_var.get()


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: str) -> str:
    _request_id_var.set(request_id)
    return request_id


def set_trace_id(trace_id: Optional[str]) -> Optional[str]:
    """
    Set the Trace ID.

    Args:
        trace_id: Lambda-Runtime-Trace-Id header value; empty clears it

    Returns:
        The value that was set
    """
    value = trace_id or None
    _trace_id_var.set(value)
    return value


def clear_context() -> None:
    """Clear the Trace ID and Request ID context."""
    _trace_id_var.set(None)
    _request_id_var.set(None)
