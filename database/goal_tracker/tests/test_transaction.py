from datetime import datetime, timezone

from database.goal_tracker.models import ItemType
from database.goal_tracker.transaction import build_goal_creation_items, build_goal_progress_items

TS = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_creation_builds_four_items(goal):
    items = build_goal_creation_items(goal, "g1", TS)

    assert [item.sk for item in items] == [
        "GOAL#Zezima#g1",
        "PROGRESS#Zezima#g1#2025-01-01T12:00:00.000000Z",
        "PROGRESS#Zezima#g1#LATEST",
        "PROGRESS#Zezima#g1#EARLIEST",
    ]
    assert {item.pk for item in items} == {"USER#user-1"}
    assert all(item.attributes["goal_id"] == "g1" for item in items)


def test_creation_metadata_attributes(goal):
    metadata = build_goal_creation_items(goal, "g1", TS)[0]

    assert metadata.must_not_exist is True
    assert metadata.attributes["item_type"] == ItemType.METADATA
    assert metadata.attributes["target_attribute"] == "Woodcutting"
    assert metadata.attributes["target_value"] == 1_000_000
    assert metadata.attributes["target_date"] == goal.target_date
    assert metadata.attributes["created_at"] == TS


def test_creation_progress_items_carry_starting_value(goal):
    _, timeline, latest, earliest = build_goal_creation_items(goal.with_progress(42), "g1", TS)

    for item in (timeline, latest, earliest):
        assert item.attributes["item_type"] == ItemType.PROGRESS
        assert item.attributes["progress_value"] == 42
        assert item.attributes["created_at"] == TS
    assert timeline.must_not_exist is True
    assert earliest.must_not_exist is True
    assert latest.must_not_exist is False


def test_progress_builds_two_items_with_one_timestamp():
    timeline, latest = build_goal_progress_items("user-1", "Zezima", "g1", 500, TS)

    assert timeline.sk == "PROGRESS#Zezima#g1#2025-01-01T12:00:00.000000Z"
    assert latest.sk == "PROGRESS#Zezima#g1#LATEST"
    assert timeline.attributes["created_at"] == latest.attributes["created_at"] == TS
    assert timeline.attributes["progress_value"] == latest.attributes["progress_value"] == 500
    assert timeline.must_not_exist is True
    assert latest.must_not_exist is False


def test_builder_is_deterministic(goal):
    assert build_goal_creation_items(goal, "g1", TS) == build_goal_creation_items(goal, "g1", TS)
    assert build_goal_progress_items("u", "c", "g", 1, TS) == build_goal_progress_items("u", "c", "g", 1, TS)
