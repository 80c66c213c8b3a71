"""Built-in type validators and the default parameter-name pattern.

Patterns are matched against the whole value (ASCII digits only), so a
trailing newline never slips through.
"""

import re
from typing import Callable

TypeValidator = Callable[[str], bool]

DEFAULT_PATTERN_NAME = "default"
DEFAULT_PARAM_PATTERN = r"^[a-zA-Z][a-zA-Z0-9_]*\Z"

_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

_BOOLEAN_LITERALS = {"true", "false", "1", "0"}


def is_number(value: str) -> bool:
    """Optionally-signed integer or decimal: '42', '-3.5'. Not '3.' or '.5'."""
    return _NUMBER_RE.fullmatch(value) is not None


def is_boolean(value: str) -> bool:
    return value.lower() in _BOOLEAN_LITERALS


def is_date(value: str) -> bool:
    """Literal YYYY-MM-DD digit shape. '2024-13-99' passes; no calendar check."""
    return _DATE_RE.fullmatch(value) is not None


def builtin_type_validators() -> dict[str, TypeValidator]:
    """Fresh copy of the built-in validator table."""
    return {
        "number": is_number,
        "boolean": is_boolean,
        "date": is_date,
    }
