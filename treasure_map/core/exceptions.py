"""
Custom exceptions for the Treasure Map service.
Store errors are rejected at the controller boundary; collaborator errors
(location, search, launch) end the current operation and are logged.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Store errors
    OUT_OF_RANGE = "OUT_OF_RANGE"
    EMPTY_INPUT = "EMPTY_INPUT"
    TREASURE_NOT_FOUND = "TREASURE_NOT_FOUND"
    NO_SELECTION = "NO_SELECTION"

    # Collaborator errors
    LOCATION_DENIED = "LOCATION_DENIED"
    LOCATION_FAILED = "LOCATION_FAILED"
    SEARCH_FAILED = "SEARCH_FAILED"
    LAUNCH_FAILED = "LAUNCH_FAILED"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TreasureMapException(Exception):
    """Base exception for the Treasure Map service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class OutOfRangeError(TreasureMapException):
    """Raised when an index does not address a row of the visible set."""

    def __init__(self, index: int, length: int):
        super().__init__(
            message=f"Index {index} is out of range for {length} visible treasures",
            error_code=ErrorCode.OUT_OF_RANGE,
            details={"index": index, "length": length},
            status_code=404
        )
        self.index = index
        self.length = length


class EmptyInputError(TreasureMapException):
    """Raised when an empty name or query is submitted."""

    def __init__(self, field: str):
        super().__init__(
            message=f"'{field}' must not be empty",
            error_code=ErrorCode.EMPTY_INPUT,
            details={"field": field},
            status_code=400
        )


class TreasureNotFoundError(TreasureMapException):
    """Raised when a treasure id is not in the visible set."""

    def __init__(self, treasure_id: str):
        super().__init__(
            message=f"Treasure '{treasure_id}' is not visible",
            error_code=ErrorCode.TREASURE_NOT_FOUND,
            details={"treasure_id": treasure_id},
            status_code=404
        )


class NoSelectionError(TreasureMapException):
    """Raised when an action needs a selected treasure and there is none."""

    def __init__(self, action: str):
        super().__init__(
            message=f"No treasure selected for '{action}'",
            error_code=ErrorCode.NO_SELECTION,
            details={"action": action},
            status_code=409
        )


class LocationDeniedError(TreasureMapException):
    """Raised when location access has not been authorized."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Location access is not authorized",
            error_code=ErrorCode.LOCATION_DENIED,
            details=details,
            status_code=403
        )


class LocationFailedError(TreasureMapException):
    """Raised when the location provider cannot produce a fix."""

    def __init__(self, message: str = "Failed to get user location", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.LOCATION_FAILED,
            details=details,
            status_code=503
        )


class SearchFailedError(TreasureMapException):
    """Raised when the upstream place search fails."""

    def __init__(self, query: str, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Search for '{query}' failed: {reason}",
            error_code=ErrorCode.SEARCH_FAILED,
            details={"query": query, "reason": reason, **(details or {})},
            status_code=502
        )
        self.query = query
        self.reason = reason


class LaunchFailedError(TreasureMapException):
    """Raised when the external maps application could not be opened."""

    def __init__(self, uri: str, reason: str = "opener declined the URI"):
        super().__init__(
            message=f"Failed to open maps app for {uri}: {reason}",
            error_code=ErrorCode.LAUNCH_FAILED,
            details={"uri": uri, "reason": reason},
            status_code=502
        )
        self.uri = uri
