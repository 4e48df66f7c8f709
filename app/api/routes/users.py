"""Users — read-only listing and lookup over the static user directory.

Invariants:
    - GET /api/users returns every user, in directory order, never empty
    - GET /api/users/{user_id} raises ResourceNotFoundError for unknown ids
      (mapped to a 404 envelope by the global handler)
    - Non-integer ids rejected by FastAPI path validation (400 envelope)
"""

from fastapi import APIRouter, Depends

from app.core.user_directory import UserDirectory, get_user_directory
from app.schemas.user import UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    directory: UserDirectory = Depends(get_user_directory),
):
    """List all users."""
    return [UserResponse.model_validate(u) for u in directory.list_users()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, directory: UserDirectory = Depends(get_user_directory),
):
    """Fetch a single user by id."""
    return UserResponse.model_validate(directory.get_user(user_id))
