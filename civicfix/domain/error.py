"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing or unacceptable input)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, actor: str):
        super().__init__(
            f"{actor} is not authorized to modify {resource} {resource_id}"
        )


class InvalidTransitionError(DomainError):
    """Raised when a requested status is not reachable from the current one."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Invalid status transition: {current} -> {requested}")


class AlreadyAssignedError(DomainError):
    """Raised when assigning an issue that already has an assignee."""

    def __init__(self, issue_id: str):
        super().__init__(f"Issue {issue_id} is already assigned")


class AlreadyVotedError(DomainError):
    """Raised when a voter upvotes the same issue twice."""

    def __init__(self, issue_id: str):
        super().__init__(f"Already voted on issue {issue_id}")
