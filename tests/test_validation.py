"""
Goal 검증 순서 및 경계값 테스트
"""

from dataclasses import replace

import pytest

from goals.errors import InvalidArgument
from goals.models import Goal
from goals.validation import validate_goal_for_creation, validate_progress


def _field(goal):
    with pytest.raises(InvalidArgument) as exc_info:
        validate_goal_for_creation(goal)
    return exc_info.value.field


def test_valid_goal_passes(goal):
    validate_goal_for_creation(goal)


def test_null_goal():
    assert _field(None) == "goal"


def test_missing_user_and_character_reports_user_first(goal):
    assert _field(replace(goal, user_id=None, character_name=None)) == "user_id"


def test_validation_order_is_stable():
    # 모든 필드가 비어 있는 상태에서 하나씩 채우며 다음 실패 필드 확인
    steps = [
        ("user_id", "user-1"),
        ("character_name", "Zezima"),
        ("target_attribute", "Woodcutting"),
        ("target_type", "xp"),
        ("target_value", 10),
        ("current_progress", 0),
        ("target_date", None),
    ]
    goal = Goal()
    for field_name, value in steps:
        assert _field(goal) == field_name
        if value is not None:
            goal = replace(goal, **{field_name: value})


@pytest.mark.parametrize("value, ok", [(0, False), (-5, False), (1, True)])
def test_target_value_boundary(goal, value, ok):
    candidate = replace(goal, target_value=value)
    if ok:
        validate_goal_for_creation(candidate)
    else:
        assert _field(candidate) == "target_value"


@pytest.mark.parametrize("value, ok", [(-1, False), (0, True), (None, False)])
def test_current_progress_boundary(goal, value, ok):
    candidate = replace(goal, current_progress=value)
    if ok:
        validate_goal_for_creation(candidate)
    else:
        assert _field(candidate) == "current_progress"


def test_whitespace_string_is_empty(goal):
    assert _field(replace(goal, target_type="   ")) == "target_type"


def test_bool_is_not_an_integer(goal):
    assert _field(replace(goal, target_value=True)) == "target_value"


def test_missing_target_date(goal):
    assert _field(replace(goal, target_date=None)) == "target_date"


def test_error_message_names_field(goal):
    with pytest.raises(InvalidArgument, match="user_id cannot be null or empty"):
        validate_goal_for_creation(replace(goal, user_id=""))


def test_progress_validation_order():
    with pytest.raises(InvalidArgument) as exc_info:
        validate_progress(None, None, None, -1)
    assert exc_info.value.field == "user_id"

    with pytest.raises(InvalidArgument) as exc_info:
        validate_progress("u", "c", "", -1)
    assert exc_info.value.field == "goal_id"

    validate_progress("u", "c", "g", 0)


def test_goal_id_is_immutable_once_assigned(goal):
    created = goal.with_goal_id("g1")

    assert created.with_goal_id("g1").goal_id == "g1"
    with pytest.raises(ValueError):
        created.with_goal_id("g2")
