"""
이벤트 기반 진입점

EventBridge 형태의 이벤트({"detail": {...}})를 받아 GoalService를 호출합니다.
detail 필드 이름은 HTTP 요청 본문과 같습니다 (camelCase).
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from api.models import GoalCreationRequest, GoalProgressRequest
from goals.errors import InvalidArgument
from goals.models import Goal
from goals.service import GoalService

logger = logging.getLogger(__name__)


def _detail(event: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if event is None:
        raise InvalidArgument("event", "event cannot be null")
    detail = event.get("detail")
    if not isinstance(detail, dict):
        raise InvalidArgument("detail", "event detail cannot be null")
    return detail


def _invalid(exc: ValidationError) -> InvalidArgument:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return InvalidArgument(field, f"{field}: {first.get('msg')}")


def handle_goal_creation_event(event: Optional[Dict[str, Any]], service: GoalService) -> Goal:
    """목표 생성 요청 이벤트 처리"""
    detail = _detail(event)
    try:
        request = GoalCreationRequest.model_validate(detail)
    except ValidationError as e:
        raise _invalid(e) from e

    logger.info(
        "Received goal creation event for user: %s, character: %s",
        request.user_id, request.character_name,
    )
    return service.create_goal(request.to_goal())


def handle_goal_progress_event(event: Optional[Dict[str, Any]], service: GoalService) -> None:
    """진행도 이벤트 처리"""
    detail = _detail(event)
    try:
        request = GoalProgressRequest.model_validate(detail)
    except ValidationError as e:
        raise _invalid(e) from e

    logger.info(
        "Received goal progress event for user: %s, character: %s, goalId: %s",
        request.user_id, request.character_name, request.goal_id,
    )
    service.record_progress_event(request.to_event())
