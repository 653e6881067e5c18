"""Marker base for domain services."""


class Service:
    """Base class for domain services.

    Services own the rules that span an issue, its timeline and the users
    involved. They are request-scoped and share the request's transaction.
    """
