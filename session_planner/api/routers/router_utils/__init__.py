"""Shared helpers for API routers."""

from .error_handling import conflict_response, handle_planner_errors

__all__ = ["conflict_response", "handle_planner_errors"]
