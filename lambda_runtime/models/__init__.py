"""
Data model definitions package.
"""

from .error_response import ErrorResponse
from .invocation import Invocation

__all__ = [
    "ErrorResponse",
    "Invocation",
]
