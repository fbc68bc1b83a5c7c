"""
Goal 검증 파이프라인

저장 시도 전에 동기적으로 실행되며 부작용이 없습니다.
검증 순서는 고정이고, 첫 번째 실패 필드만 InvalidArgument로 보고합니다.
"""

from datetime import datetime
from typing import Any, Optional

from goals.errors import InvalidArgument
from goals.models import Goal


def validate_string_not_empty(value: Optional[str], field_name: str) -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgument(field_name, f"{field_name} cannot be null or empty")


def validate_not_null(value: Any, field_name: str) -> None:
    if value is None:
        raise InvalidArgument(field_name, f"{field_name} cannot be null")


def _validate_integer(value: Any, field_name: str) -> None:
    validate_not_null(value, field_name)
    # bool은 int의 하위 클래스이므로 별도로 거부
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(field_name, f"{field_name} must be an integer")


def validate_positive(value: Any, field_name: str) -> None:
    _validate_integer(value, field_name)
    if value <= 0:
        raise InvalidArgument(field_name, f"{field_name} must be greater than 0")


def validate_non_negative(value: Any, field_name: str) -> None:
    _validate_integer(value, field_name)
    if value < 0:
        raise InvalidArgument(field_name, f"{field_name} cannot be negative")


def validate_goal_for_creation(goal: Optional[Goal]) -> None:
    """
    목표 생성 검증

    순서: user_id → character_name → target_attribute → target_type
          → target_value → current_progress → target_date

    Raises:
        InvalidArgument: 첫 번째로 잘못된 필드
    """
    validate_not_null(goal, "goal")
    validate_string_not_empty(goal.user_id, "user_id")
    validate_string_not_empty(goal.character_name, "character_name")
    validate_string_not_empty(goal.target_attribute, "target_attribute")
    validate_string_not_empty(goal.target_type, "target_type")
    validate_positive(goal.target_value, "target_value")
    validate_non_negative(goal.current_progress, "current_progress")
    validate_not_null(goal.target_date, "target_date")
    if not isinstance(goal.target_date, datetime):
        raise InvalidArgument("target_date", "target_date must be a datetime")


def validate_progress(
    user_id: Optional[str],
    character_name: Optional[str],
    goal_id: Optional[str],
    progress_value: Optional[int],
) -> None:
    """
    진행도 기록 검증

    순서: user_id → character_name → goal_id → progress_value
    """
    validate_string_not_empty(user_id, "user_id")
    validate_string_not_empty(character_name, "character_name")
    validate_string_not_empty(goal_id, "goal_id")
    validate_non_negative(progress_value, "progress_value")
