"""Issue routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from civicfix.application.usecase.issue import (
    AssignIssueRequest,
    AssignIssueUseCase,
    ChangeStatusRequest,
    ChangeStatusUseCase,
    DeleteIssueRequest,
    DeleteIssueResponse,
    DeleteIssueUseCase,
    GetIssueRequest,
    GetIssueUseCase,
    GetTimelineRequest,
    GetTimelineResponse,
    GetTimelineUseCase,
    IssueView,
    ListIssuesRequest,
    ListIssuesResponse,
    ListIssuesUseCase,
    RejectIssueRequest,
    RejectIssueUseCase,
    ReportIssueRequest,
    ReportIssueUseCase,
    UpdateIssueRequest,
    UpdateIssueUseCase,
    UpvoteIssueRequest,
    UpvoteIssueResponse,
    UpvoteIssueUseCase,
)
from civicfix.domain.service import TokenService, UserService
from civicfix.domain.value import IssueStatus, UserRole
from civicfix.interface.api.auth import require_user
from civicfix.interface.error import domain_errors

router = APIRouter(prefix="/issues", tags=["issues"], route_class=DishkaRoute)


class ReportIssueAPIRequest(BaseModel):
    """API request for reporting an issue."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=300)
    image_url: str | None = None


class UpdateIssueAPIRequest(BaseModel):
    """API request for editing a pending issue."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    image_url: str | None = None


class AssignIssueAPIRequest(BaseModel):
    """API request for assigning staff."""

    staff_email: str


class ChangeStatusAPIRequest(BaseModel):
    """API request for a status change."""

    status: IssueStatus


@router.post("", response_model=IssueView, status_code=status.HTTP_201_CREATED)
async def report_issue(
    request: ReportIssueAPIRequest,
    report_issue_use_case: FromDishka[ReportIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> IssueView:
    """Report a new issue.

    Requires a citizen. Free citizens may hold a limited number of reports.
    """
    user = await require_user(
        authorization, token_service, user_service, UserRole.CITIZEN
    )

    with domain_errors("Issue report"):
        return await report_issue_use_case.execute(
            ReportIssueRequest(
                title=request.title,
                description=request.description,
                category=request.category,
                location=request.location,
                image_url=request.image_url,
                reporter_email=user.email,
            )
        )


@router.get("", response_model=ListIssuesResponse)
async def list_issues(
    list_issues_use_case: FromDishka[ListIssuesUseCase],
    status_filter: IssueStatus | None = Query(default=None, alias="status"),
    category: str | None = Query(default=None),
    search: str | None = Query(default=None),
    reporter: str | None = Query(default=None),
    assignee: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListIssuesResponse:
    """List issues, boosted first and newest first.

    Args:
        status_filter: Only issues in this status
        category: Only issues in this category (case-insensitive)
        search: Substring match on title, category or location
        reporter: Only issues reported by this email
        assignee: Only issues assigned to this staff email
        limit: Page size (capped by configuration)
        offset: Number of issues to skip
    """
    with domain_errors("List issues"):
        return await list_issues_use_case.execute(
            ListIssuesRequest(
                status=status_filter,
                category=category,
                search=search,
                reporter_email=reporter,
                assigned_staff_email=assignee,
                limit=limit,
                offset=offset,
            )
        )


@router.get("/{issue_id}", response_model=IssueView)
async def get_issue(
    issue_id: UUID,
    get_issue_use_case: FromDishka[GetIssueUseCase],
) -> IssueView:
    """Get a single issue."""
    with domain_errors("Get issue"):
        return await get_issue_use_case.execute(GetIssueRequest(issue_id=issue_id))


@router.get("/{issue_id}/timeline", response_model=GetTimelineResponse)
async def get_timeline(
    issue_id: UUID,
    get_timeline_use_case: FromDishka[GetTimelineUseCase],
) -> GetTimelineResponse:
    """Get an issue's audit timeline, oldest entry first."""
    with domain_errors("Get timeline"):
        return await get_timeline_use_case.execute(
            GetTimelineRequest(issue_id=issue_id)
        )


@router.patch("/{issue_id}", response_model=IssueView)
async def update_issue(
    issue_id: UUID,
    request: UpdateIssueAPIRequest,
    update_issue_use_case: FromDishka[UpdateIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> IssueView:
    """Edit a pending issue. Only its reporter may edit."""
    user = await require_user(authorization, token_service, user_service)

    with domain_errors("Issue update"):
        return await update_issue_use_case.execute(
            UpdateIssueRequest(
                issue_id=issue_id,
                reporter_email=user.email,
                **request.model_dump(exclude_none=True),
            )
        )


@router.delete("/{issue_id}", response_model=DeleteIssueResponse)
async def delete_issue(
    issue_id: UUID,
    delete_issue_use_case: FromDishka[DeleteIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> DeleteIssueResponse:
    """Delete an issue. Only its reporter may delete."""
    user = await require_user(authorization, token_service, user_service)

    with domain_errors("Issue deletion"):
        return await delete_issue_use_case.execute(
            DeleteIssueRequest(issue_id=issue_id, reporter_email=user.email)
        )


@router.post("/{issue_id}/upvote", response_model=UpvoteIssueResponse)
async def upvote_issue(
    issue_id: UUID,
    upvote_issue_use_case: FromDishka[UpvoteIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> UpvoteIssueResponse:
    """Upvote an issue once."""
    user = await require_user(authorization, token_service, user_service)

    with domain_errors("Upvote"):
        return await upvote_issue_use_case.execute(
            UpvoteIssueRequest(issue_id=issue_id, voter_email=user.email)
        )


@router.patch("/{issue_id}/assign", response_model=IssueView)
async def assign_issue(
    issue_id: UUID,
    request: AssignIssueAPIRequest,
    assign_issue_use_case: FromDishka[AssignIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> IssueView:
    """Assign a staff member. Admin only; an issue is assigned at most once."""
    await require_user(authorization, token_service, user_service, UserRole.ADMIN)

    with domain_errors("Issue assignment"):
        return await assign_issue_use_case.execute(
            AssignIssueRequest(issue_id=issue_id, staff_email=request.staff_email)
        )


@router.patch("/{issue_id}/status", response_model=IssueView)
async def change_status(
    issue_id: UUID,
    request: ChangeStatusAPIRequest,
    change_status_use_case: FromDishka[ChangeStatusUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> IssueView:
    """Move an issue to its next status. Only the assigned staff member."""
    user = await require_user(
        authorization, token_service, user_service, UserRole.STAFF
    )

    with domain_errors("Status change"):
        return await change_status_use_case.execute(
            ChangeStatusRequest(
                issue_id=issue_id, status=request.status, staff_email=user.email
            )
        )


@router.patch("/{issue_id}/reject", response_model=IssueView)
async def reject_issue(
    issue_id: UUID,
    reject_issue_use_case: FromDishka[RejectIssueUseCase],
    token_service: FromDishka[TokenService],
    user_service: FromDishka[UserService],
    authorization: str | None = Header(default=None),
) -> IssueView:
    """Reject an issue. Admin only."""
    await require_user(authorization, token_service, user_service, UserRole.ADMIN)

    with domain_errors("Issue rejection"):
        return await reject_issue_use_case.execute(
            RejectIssueRequest(issue_id=issue_id)
        )
