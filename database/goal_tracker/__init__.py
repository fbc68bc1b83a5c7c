"""
Goal Tracker 저장소 패키지 초기화

연결(engine, SessionLocal)은 database.goal_tracker.core.connection에서
필요할 때 직접 import 합니다.
"""

from database.goal_tracker.models import Base, GoalTrackerItem, ItemType
from database.goal_tracker.transaction import PutItem
from database.goal_tracker.gateway import StorageGateway, MAX_TRANSACTION_ITEMS
from database.goal_tracker.repository import GoalRepository

__all__ = [
    "Base",
    "GoalTrackerItem",
    "ItemType",
    "PutItem",
    "StorageGateway",
    "MAX_TRANSACTION_ITEMS",
    "GoalRepository",
]
