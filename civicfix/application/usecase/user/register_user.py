"""Register user use case."""

import logfire
from pydantic import BaseModel

from civicfix.config import AuthSettings
from civicfix.domain.service import UserService
from civicfix.domain.value import UserRole

from .views import UserView


class RegisterUserRequest(BaseModel):
    """Register user request.

    ``email`` comes from the verified token, never from the request body.
    """

    email: str
    name: str | None = None
    photo_url: str | None = None


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user: UserView
    created: bool
    message: str


class RegisterUserUseCase:
    """Use case for first sign-in of an identity-provider user.

    Registration is idempotent: a known email returns the stored user.
    """

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            auth_settings: Auth settings (admin seed list)
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    def _initial_role(self, email: str) -> UserRole:
        admins = {e.lower() for e in self.auth_settings.admin_emails}
        return UserRole.ADMIN if email.lower() in admins else UserRole.CITIZEN

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        with logfire.span("register_user.execute", email=request.email):
            user, created = await self.user_service.register(
                email=request.email,
                name=request.name,
                photo_url=request.photo_url,
                role=self._initial_role(request.email),
            )
            return RegisterUserResponse(
                user=UserView.from_user(user),
                created=created,
                message="User created." if created else "User already exists.",
            )
