"""Dashboard use cases."""

from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase

__all__ = ["GetStatsRequest", "GetStatsResponse", "GetStatsUseCase"]
