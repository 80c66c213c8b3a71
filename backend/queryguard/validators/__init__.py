"""Query Validator — parameter-name, declaration and type checks for query strings.

Usage:
    from queryguard.validators import query_validator

    errors = query_validator.validate_query(request.query_params.items(), rules)
    if errors:
        # Respond 400 with {"errors": [...]}
"""

from queryguard.validators.query_validator import (
    QueryValidator,
    QueryValidatorBuilder,
    query_validator,
)
from queryguard.validators.models import (
    ErrorMessage,
    PatternCompileError,
    QueryValidationError,
    QueryValidationFailed,
)

__all__ = [
    "QueryValidator",
    "QueryValidatorBuilder",
    "query_validator",
    "ErrorMessage",
    "PatternCompileError",
    "QueryValidationError",
    "QueryValidationFailed",
]
