from .allocation import (
    allocation_summary,
    apply_savings_to_profile,
    calculate_needs_amount,
    calculate_projected_savings,
    calculate_wants_amount,
)
from .projector import estimate_goal_completion_months, project_goal, projection_table
from .state import ProfileStore
from .storage import StorageResult, load_profiles, save_profiles
from .tasks import open_cost_by_category, task_frame

__all__ = [
    "ProfileStore",
    "StorageResult",
    "allocation_summary",
    "apply_savings_to_profile",
    "calculate_needs_amount",
    "calculate_projected_savings",
    "calculate_wants_amount",
    "estimate_goal_completion_months",
    "load_profiles",
    "open_cost_by_category",
    "project_goal",
    "projection_table",
    "save_profiles",
    "task_frame",
]
