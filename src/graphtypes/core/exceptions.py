"""
Custom exception classes for the graphtypes package.

Type resolution never raises: inconsistent or unknown property types degrade
to ``String``. The only core failure is a nil label; everything else here
belongs to the input-loading layer.
"""

from typing import Any, Dict, Optional


class GraphTypesException(Exception):
    """Base exception class for all graphtypes exceptions."""

    pass


class InvalidArgumentError(GraphTypesException, ValueError):
    """Raised when a required argument is missing (e.g. a nil label)."""

    pass


class PropertyRecordError(GraphTypesException):
    """
    Raised when a payload cannot be read as property type records.

    Example:
        >>> raise PropertyRecordError(
        ...     reason="Unsupported payload",
        ...     details={"type": "str"}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)
