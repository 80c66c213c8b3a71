"""Users API — example route guarded by query validation."""

from fastapi import APIRouter, Depends

from queryguard.api.dependencies import require_valid_query
from queryguard.models.responses import QueryErrorResponse, UserQueryResponse

router = APIRouter()

# Declared query rules for the users route. "string" has no registered
# validator, so any value is accepted.
USER_QUERY_RULES = {
    "age": "number",
    "status": "string",
    "search": "string",
}


@router.get(
    "/users/{id}",
    response_model=UserQueryResponse,
    responses={400: {"model": QueryErrorResponse}},
)
async def get_users(
    id: str,
    filters: dict[str, str] = Depends(require_valid_query(USER_QUERY_RULES)),
):
    """Return the validated filters for the requested user collection."""
    return UserQueryResponse(id=id, filters=filters)
