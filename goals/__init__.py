"""
Goal 도메인 패키지 초기화
"""

from goals.errors import GoalTrackerError, InvalidArgument, StorageFailure, HiscoresError
from goals.models import Goal, GoalProgressEvent

__all__ = [
    "GoalTrackerError",
    "InvalidArgument",
    "StorageFailure",
    "HiscoresError",
    "Goal",
    "GoalProgressEvent",
]
