"""
Planner configuration.

``get_settings()`` returns the process-wide Settings; sections read the
``POSTGRES_*`` and ``PLANNER_*`` environment variables (or ``.env``).
"""

from session_planner.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
