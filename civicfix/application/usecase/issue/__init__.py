"""Issue use cases."""

from .assign_issue import AssignIssueRequest, AssignIssueUseCase
from .change_status import ChangeStatusRequest, ChangeStatusUseCase
from .delete_issue import DeleteIssueRequest, DeleteIssueResponse, DeleteIssueUseCase
from .get_issue import GetIssueRequest, GetIssueUseCase
from .get_timeline import GetTimelineRequest, GetTimelineResponse, GetTimelineUseCase
from .list_issues import ListIssuesRequest, ListIssuesResponse, ListIssuesUseCase
from .reject_issue import RejectIssueRequest, RejectIssueUseCase
from .report_issue import ReportIssueRequest, ReportIssueUseCase
from .update_issue import UpdateIssueRequest, UpdateIssueUseCase
from .upvote_issue import UpvoteIssueRequest, UpvoteIssueResponse, UpvoteIssueUseCase
from .views import IssueView, TimelineEntryView

__all__ = [
    "AssignIssueRequest",
    "AssignIssueUseCase",
    "ChangeStatusRequest",
    "ChangeStatusUseCase",
    "DeleteIssueRequest",
    "DeleteIssueResponse",
    "DeleteIssueUseCase",
    "GetIssueRequest",
    "GetIssueUseCase",
    "GetTimelineRequest",
    "GetTimelineResponse",
    "GetTimelineUseCase",
    "IssueView",
    "ListIssuesRequest",
    "ListIssuesResponse",
    "ListIssuesUseCase",
    "RejectIssueRequest",
    "RejectIssueUseCase",
    "ReportIssueRequest",
    "ReportIssueUseCase",
    "TimelineEntryView",
    "UpdateIssueRequest",
    "UpdateIssueUseCase",
    "UpvoteIssueRequest",
    "UpvoteIssueResponse",
    "UpvoteIssueUseCase",
]
