"""Request dependencies that run the query validator before a route body."""

from collections.abc import Mapping
from typing import Callable, Optional

import structlog
from fastapi import Request

from queryguard.validators import QueryValidator, QueryValidationFailed, query_validator

logger = structlog.get_logger()


def require_valid_query(
    rules: Mapping[str, str],
    validator: Optional[QueryValidator] = None,
) -> Callable[[Request], dict[str, str]]:
    """Build a dependency that validates the request query against `rules`.

    The dependency returns the query as a dict on success and raises
    QueryValidationFailed with every finding otherwise. Repeated names keep
    their last value, in first-seen order.

    Args:
        rules: Expected parameter name → type tag, fixed for the route
        validator: Validator to use. If None, the shared default.
    """
    rules = dict(rules)

    def dependency(request: Request) -> dict[str, str]:
        active = validator or query_validator
        params = list(request.query_params.items())
        errors = active.validate_query(params, rules)
        if errors:
            logger.info(
                "query_rejected",
                path=request.url.path,
                total_errors=len(errors),
                parameters=[e.parameter for e in errors],
            )
            raise QueryValidationFailed(errors)
        return dict(params)

    return dependency
