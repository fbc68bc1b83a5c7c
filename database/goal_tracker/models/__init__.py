from database.goal_tracker.models.base import Base
from database.goal_tracker.models.item import GoalTrackerItem, ItemType

__all__ = ["Base", "GoalTrackerItem", "ItemType"]
