"""Domain layer: errors and constants."""

from .errors import (
    BaselineCompareError,
    ErrorCodes,
    InvalidArgumentError,
    NormalizationConflictError,
    StreamNotSupportedError,
    TruncatedStreamError,
)

__all__ = [
    "BaselineCompareError",
    "ErrorCodes",
    "InvalidArgumentError",
    "NormalizationConflictError",
    "StreamNotSupportedError",
    "TruncatedStreamError",
]
