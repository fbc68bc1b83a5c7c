"""
저장소 게이트웨이

여러 레코드를 하나의 DB 트랜잭션으로 적용합니다.
모든 레코드가 함께 커밋되거나, 하나도 반영되지 않습니다.
재시도나 순서 변경은 하지 않습니다.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from database.goal_tracker.models.item import GoalTrackerItem
from database.goal_tracker.transaction import PutItem
from goals.errors import StorageFailure

logger = logging.getLogger(__name__)

# DynamoDB TransactWriteItems 한도와 동일
MAX_TRANSACTION_ITEMS = 100

# (pk, sk) 충돌 시 덮어쓰는 INSERT 구문
_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class StorageGateway:
    """
    원자적 다중 레코드 쓰기 게이트웨이

    Examples:
        >>> gateway = StorageGateway(SessionLocal)
        >>> gateway.apply_atomically(items)
    """

    def __init__(self, session_factory: sessionmaker):
        """
        Args:
            session_factory: SQLAlchemy sessionmaker (연결 설정은 호출자가 주입)
        """
        self.session_factory = session_factory

    def apply_atomically(self, items: Iterable[PutItem]) -> None:
        """
        레코드 묶음을 원자적으로 적용

        Raises:
            StorageFailure: 트랜잭션이 완료되지 않은 경우 (부분 반영 없음)
        """
        items = list(items)
        if not items:
            return

        self._check_limits(items)

        try:
            with self.session_factory.begin() as session:
                for item in items:
                    self._put(session, item)
        except IntegrityError as e:
            # must_not_exist 레코드의 키가 이미 있으면 기본 키 제약으로 실패
            logger.error("Transaction cancelled by key constraint: %s", e.orig)
            raise StorageFailure(f"Transaction cancelled: {e.orig}") from e
        except SQLAlchemyError as e:
            logger.error("Transaction failed for %d items: %s", len(items), e)
            raise StorageFailure(f"Transaction failed: {e}") from e

        logger.debug("Applied %d items atomically", len(items))

    def get_item(self, pk: str, sk: str) -> Optional[GoalTrackerItem]:
        """(pk, sk)로 레코드 하나 조회"""
        with self.session_factory() as session:
            item = session.get(GoalTrackerItem, (pk, sk))
            if item is not None:
                session.expunge(item)
            return item

    def query(self, pk: str, sk_prefix: str = "") -> List[GoalTrackerItem]:
        """파티션 안에서 정렬 키 접두사로 범위 조회 (sk 오름차순)"""
        stmt = select(GoalTrackerItem).where(GoalTrackerItem.pk == pk)
        if sk_prefix:
            # LIKE는 SQLite에서 대소문자를 구분하지 않으므로 substr로 정확히 비교
            stmt = stmt.where(func.substr(GoalTrackerItem.sk, 1, len(sk_prefix)) == sk_prefix)
        stmt = stmt.order_by(GoalTrackerItem.sk)
        with self.session_factory() as session:
            items = list(session.scalars(stmt))
            session.expunge_all()
            return items

    @staticmethod
    def _check_limits(items: List[PutItem]) -> None:
        if len(items) > MAX_TRANSACTION_ITEMS:
            raise StorageFailure(
                f"Transaction has {len(items)} items; limit is {MAX_TRANSACTION_ITEMS}"
            )
        seen = set()
        for item in items:
            key = (item.pk, item.sk)
            if key in seen:
                raise StorageFailure(f"Transaction contains duplicate key: pk='{item.pk}', sk='{item.sk}'")
            seen.add(key)

    @staticmethod
    def _put(session: Session, item: PutItem) -> None:
        """
        레코드 하나를 쓰기 (조회 없이 단일 문장)

        - must_not_exist: 일반 INSERT, 키 충돌 시 IntegrityError
        - 그 외: INSERT ... ON CONFLICT (pk, sk) DO UPDATE
        """
        values = {"pk": item.pk, "sk": item.sk, **item.attributes}

        if item.must_not_exist:
            session.execute(insert(GoalTrackerItem).values(**values))
            return

        dialect = session.get_bind().dialect.name
        if dialect == "mysql":
            stmt = mysql.insert(GoalTrackerItem).values(**values)
            stmt = stmt.on_duplicate_key_update(**{k: stmt.inserted[k] for k in item.attributes})
        elif dialect in _UPSERT_DIALECTS:
            stmt = _UPSERT_DIALECTS[dialect](GoalTrackerItem).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=["pk", "sk"],
                set_={k: stmt.excluded[k] for k in item.attributes},
            )
        else:
            raise StorageFailure(f"Upsert is not supported for dialect '{dialect}'")
        session.execute(stmt)
