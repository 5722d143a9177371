"""
Custom exception classes.

Represent the failure kinds produced while talking to the Runtime API.
"""


class LambdaRuntimeError(Exception):
    """Base exception class for Runtime API exchanges."""

    pass


class BadStatusCodeError(LambdaRuntimeError):
    """Raised when the response status does not match the expected code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unexpected status code from Runtime API: {status_code}")


class UpstreamError(LambdaRuntimeError):
    """Transport-level timeout or connection reset."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Runtime API upstream error: {reason}")


class InvocationMissingHeaderError(LambdaRuntimeError):
    """A required invocation header was absent, empty or unparseable."""

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Invocation missing header: {header}")


class NoBodyError(LambdaRuntimeError):
    """Raised when the next-invocation response carries no payload."""

    def __init__(self):
        super().__init__("Invocation response has no body")


class JsonEncodingError(LambdaRuntimeError):
    """Raised when an error payload cannot be serialized."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to encode error payload: {cause}")
