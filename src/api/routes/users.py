"""User routes."""

from fastapi import APIRouter, Depends

from api.routes.resource_router import register_resource_routes
from core.dependencies import UserManagerDep
from core.exceptions import ForbiddenError
from core.identity import create_access_token, get_current_user
from schemas.user import AccessTokenResponse, CreateUserRequest, UpdateUserRequest, User
from utils.converters import user_to_schema
from utils.policies import is_admin

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("/me", response_model=User, summary="Get current user")
def get_me(current_user: User = Depends(get_current_user)) -> User:
    """Return the resolved identity of the caller.

    Clients use this to learn their stored role instead of trusting local state.
    """
    return current_user


@router.post("/{user_id}/token", response_model=AccessTokenResponse, summary="Issue access token")
def issue_token(
    user_id: str,
    user_manager: UserManagerDep,
    current_user: User = Depends(get_current_user),
) -> AccessTokenResponse:
    """Issue a bearer token for a user (admin only).

    Args:
        user_id: Subject of the token.
        user_manager: Injected UserManager instance.
        current_user: Current authenticated user.

    Returns:
        AccessTokenResponse with the signed token.

    Raises:
        ForbiddenError: If the caller is not an admin.
        NotFoundError: If the user does not exist.
    """
    if not is_admin(current_user):
        raise ForbiddenError("Only admins can issue tokens")
    user = user_manager.get(current_user, user_id)
    return AccessTokenResponse(access_token=create_access_token(user.user_id))


register_resource_routes(
    router,
    manager_dep=UserManagerDep,
    serialize=user_to_schema,
    response_model=User,
    create_model=CreateUserRequest,
    update_model=UpdateUserRequest,
    noun="user",
)
