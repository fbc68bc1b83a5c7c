from datetime import datetime, timezone

import pytest
from sqlalchemy import event, func, select

from database.goal_tracker import GoalTrackerItem, MAX_TRANSACTION_ITEMS, PutItem
from goals.errors import StorageFailure

TS = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _progress(sk: str, value: int, must_not_exist: bool = False) -> PutItem:
    return PutItem(
        pk="USER#user-1",
        sk=sk,
        attributes={
            "item_type": "GOAL_PROGRESS",
            "user_id": "user-1",
            "character_name": "Zezima",
            "goal_id": "g1",
            "progress_value": value,
            "created_at": TS,
        },
        must_not_exist=must_not_exist,
    )


def _count(session_factory) -> int:
    with session_factory() as session:
        return session.scalar(select(func.count()).select_from(GoalTrackerItem))


def test_apply_atomically_writes_all_items(gateway, session_factory):
    gateway.apply_atomically([_progress("A", 1), _progress("B", 2)])

    assert _count(session_factory) == 2
    assert gateway.get_item("USER#user-1", "B").progress_value == 2


def test_put_overwrites_same_key(gateway):
    gateway.apply_atomically([_progress("LATEST", 1)])
    gateway.apply_atomically([_progress("LATEST", 7)])

    assert gateway.get_item("USER#user-1", "LATEST").progress_value == 7
    assert len(gateway.query("USER#user-1")) == 1


def test_condition_failure_rolls_back_whole_transaction(gateway, session_factory):
    gateway.apply_atomically([_progress("EARLIEST", 0, must_not_exist=True)])

    with pytest.raises(StorageFailure):
        gateway.apply_atomically([
            _progress("NEW-1", 5),
            _progress("LATEST", 5),
            _progress("EARLIEST", 5, must_not_exist=True),
        ])

    assert _count(session_factory) == 1
    assert gateway.get_item("USER#user-1", "NEW-1") is None
    assert gateway.get_item("USER#user-1", "EARLIEST").progress_value == 0


def test_database_error_is_wrapped(gateway):
    broken = PutItem(pk="USER#user-1", sk="X", attributes={"item_type": "GOAL_PROGRESS"})

    with pytest.raises(StorageFailure) as exc_info:
        gateway.apply_atomically([_progress("A", 1), broken])

    assert exc_info.value.__cause__ is not None
    assert gateway.get_item("USER#user-1", "A") is None


def test_too_many_items_rejected_before_io(gateway, session_factory):
    items = [_progress(f"K{i:04d}", i) for i in range(MAX_TRANSACTION_ITEMS + 1)]

    with pytest.raises(StorageFailure):
        gateway.apply_atomically(items)
    assert _count(session_factory) == 0


def test_duplicate_keys_rejected(gateway, session_factory):
    with pytest.raises(StorageFailure):
        gateway.apply_atomically([_progress("A", 1), _progress("A", 2)])
    assert _count(session_factory) == 0


def test_empty_transaction_is_noop(gateway, session_factory):
    gateway.apply_atomically([])
    assert _count(session_factory) == 0


def test_query_orders_by_sort_key_and_filters_prefix(gateway):
    gateway.apply_atomically([_progress("P#2", 2), _progress("P#1", 1), _progress("Q#1", 9)])

    assert [item.sk for item in gateway.query("USER#user-1", "P#")] == ["P#1", "P#2"]
    assert gateway.query("USER#other") == []


def test_writes_issue_no_reads(gateway, engine):
    gateway.apply_atomically([_progress("LATEST", 1), _progress("T#1", 1, must_not_exist=True)])
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement.lstrip().split(None, 1)[0].upper())

    event.listen(engine, "before_cursor_execute", record)
    try:
        gateway.apply_atomically([_progress("T#2", 2, must_not_exist=True), _progress("LATEST", 2)])
    finally:
        event.remove(engine, "before_cursor_execute", record)

    assert "SELECT" not in statements
    assert statements.count("INSERT") == 2
    assert gateway.get_item("USER#user-1", "LATEST").progress_value == 2
