"""
Core infrastructure: exceptions, error handlers, logging, metrics and
dependency wiring.
"""

from .exceptions import (
    ErrorCode,
    TreasureMapException,
    OutOfRangeError,
    EmptyInputError,
    TreasureNotFoundError,
    NoSelectionError,
    LocationDeniedError,
    LocationFailedError,
    SearchFailedError,
    LaunchFailedError,
)

__all__ = [
    "ErrorCode",
    "TreasureMapException",
    "OutOfRangeError",
    "EmptyInputError",
    "TreasureNotFoundError",
    "NoSelectionError",
    "LocationDeniedError",
    "LocationFailedError",
    "SearchFailedError",
    "LaunchFailedError",
]
