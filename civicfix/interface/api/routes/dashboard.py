"""Dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from civicfix.application.usecase.dashboard import (
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
)
from civicfix.domain.service import TokenService, UserService
from civicfix.interface.api.auth import require_user
from civicfix.interface.error import domain_errors

router = APIRouter(prefix="/dashboard", tags=["dashboard"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetStatsUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> GetStatsResponse:
    """Issue counts by status, scoped to the caller's role."""
    user = await require_user(authorization, token_service, user_service)

    with domain_errors("Dashboard stats"):
        return await get_stats_use_case.execute(
            GetStatsRequest(email=user.email, role=user.role)
        )
