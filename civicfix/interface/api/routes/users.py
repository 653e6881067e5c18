"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, Response, status
from pydantic import BaseModel

from civicfix.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
    UserView,
)
from civicfix.domain.service import TokenService, UserService
from civicfix.domain.value import UserRole
from civicfix.interface.api.auth import authenticate, require_user
from civicfix.interface.error import domain_errors

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class RegisterUserAPIRequest(BaseModel):
    """API request for registering the token's owner."""

    name: str | None = None
    photo_url: str | None = None


class UpdateRoleAPIRequest(BaseModel):
    """API request for changing a user's role."""

    role: UserRole


@router.post("", response_model=RegisterUserResponse)
async def register_user(
    request: RegisterUserAPIRequest,
    response: Response,
    register_user_use_case: FromDishka[RegisterUserUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> RegisterUserResponse:
    """Register the authenticated identity as a user.

    Idempotent: an already registered email returns the stored profile with
    the message "User already exists.".
    """
    payload = authenticate(authorization, token_service)

    with domain_errors("User registration"):
        result = await register_user_use_case.execute(
            RegisterUserRequest(
                email=payload.email,
                name=request.name or payload.name,
                photo_url=request.photo_url,
            )
        )

    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.get("/me", response_model=UserView)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token_service: FromDishka[TokenService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Get the authenticated user's profile."""
    payload = authenticate(authorization, token_service)

    with domain_errors("Get current user"):
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(email=payload.email)
        )


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    role: UserRole | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListUsersResponse:
    """List users. Admin only."""
    await require_user(authorization, token_service, user_service, UserRole.ADMIN)

    with domain_errors("List users"):
        return await list_users_use_case.execute(
            ListUsersRequest(role=role, limit=limit, offset=offset)
        )


@router.patch("/{email}/role", response_model=UserView)
async def update_user_role(
    email: str,
    request: UpdateRoleAPIRequest,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> UserView:
    """Change a user's role. Admin only."""
    await require_user(authorization, token_service, user_service, UserRole.ADMIN)

    with domain_errors("Update user role"):
        return await update_user_role_use_case.execute(
            UpdateUserRoleRequest(email=email, role=request.role)
        )
