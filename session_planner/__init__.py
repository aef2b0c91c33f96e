"""
Smart Session Planner.

Weekly session planning service: session types with priorities, recurring
availability windows, scheduled sessions with conflict detection, scored
time-slot suggestions and progress statistics.
"""

__version__ = "0.1.0"
