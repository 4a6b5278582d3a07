"""Scheduling engine: service-day calculation and leader/participant rotation."""

from .service_days import get_service_days, sunday_weekday
from .orchestrator import Orchestrator, build_month_schedule
from .rotation import RotationQueue, RotationScheduler, assign_rotation, generate_schedule

__all__ = [
    "get_service_days",
    "sunday_weekday",
    "RotationQueue",
    "RotationScheduler",
    "assign_rotation",
    "generate_schedule",
    "Orchestrator",
    "build_month_schedule",
]
