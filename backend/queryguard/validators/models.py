"""Validation models — error records and the exceptions raised around them.

Validation errors are collected, never raised. The only exception the
validator itself raises is PatternCompileError, at configuration time.
"""

from enum import Enum

from pydantic import BaseModel


class ErrorMessage(str, Enum):
    """Fixed messages attached to every query validation finding."""

    INVALID_NAME_FORMAT = "invalid parameter name format"
    UNEXPECTED_PARAMETER = "unexpected parameter"
    INVALID_TYPE_VALUE = "invalid value for type {type_tag}"


class QueryValidationError(BaseModel):
    """A single failed check against one observed query parameter."""

    parameter: str
    value: str
    message: str

    model_config = {"frozen": True}


class PatternCompileError(ValueError):
    """A parameter-name pattern could not be compiled."""

    def __init__(self, name: str, pattern: str, reason: str):
        self.name = name
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern for {name}: {reason}")


class QueryValidationFailed(Exception):
    """Raised by request dependencies when a query fails validation.

    Carries every finding so the handler can report them together.
    """

    def __init__(self, errors: list[QueryValidationError]):
        self.errors = errors
        super().__init__(f"{len(errors)} invalid query parameter(s)")
