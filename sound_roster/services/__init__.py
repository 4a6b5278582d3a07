"""Services for scheduling logic."""

from .constraints import conflict_label, describe_conflicts, is_available
from .requirements import check_minimum_headcount, headcount_by_role

__all__ = [
    "is_available",
    "conflict_label",
    "describe_conflicts",
    "check_minimum_headcount",
    "headcount_by_role",
]
