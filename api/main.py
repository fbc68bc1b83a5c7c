"""
FastAPI Backend for Goal Tracker

핵심 구조:
1. GoalService 인스턴스는 앱 시작 시 한 번만 생성 (lifespan)
2. 각 요청은 독립적으로 처리되며 요청 간 공유되는 가변 상태 없음
3. InvalidArgument → 400, StorageFailure → 500, HiscoresError → 502
   (모두 {"error": "..."} 본문)
"""

import sys
import logging
from pathlib import Path
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Project root setup
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

# Load .env
load_dotenv(project_root / ".env")

from config import settings, hiscores_config, configure_logging
from database.goal_tracker import Base, GoalRepository, StorageGateway
from goals.errors import InvalidArgument, StorageFailure, HiscoresError
from goals.hiscores import HiscoresClient
from goals.service import GoalService
from api.models import (
    GoalCreationRequest,
    GoalProgressRequest,
    GoalResponse,
    ErrorResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Global Service Instance (initialized once at startup)
# ============================================================================

_service: Optional[GoalService] = None


def get_service() -> GoalService:
    """전역 service 인스턴스 반환"""
    if _service is None:
        raise RuntimeError("GoalService not initialized. This should not happen.")
    return _service


def build_service() -> GoalService:
    """설정으로부터 GoalService 조립 (engine, 게이트웨이, 저장소, hiscores)"""
    from database.goal_tracker.core.connection import engine, SessionLocal

    Base.metadata.create_all(bind=engine)

    hiscores = None
    if hiscores_config.hiscores_enabled:
        hiscores = HiscoresClient(
            base_url=hiscores_config.hiscores_base_url,
            timeout=hiscores_config.hiscores_timeout,
        )

    repository = GoalRepository(StorageGateway(SessionLocal))
    return GoalService(repository, hiscores=hiscores)


# ============================================================================
# Application Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI 라이프사이클 관리

    앱 시작 시 GoalService를 한 번만 생성하고,
    모든 요청에서 재사용합니다.
    """
    global _service

    configure_logging()
    logger.info("[🔧] Initializing GoalService with settings: %s", settings.describe())
    _service = build_service()
    logger.info("[✅] GoalService initialized successfully")

    yield

    # Shutdown
    logger.info("[👋] FastAPI server shutting down...")
    _service = None


app = FastAPI(
    title="Goal Tracker API",
    description="OSRS goal and progress tracking with atomic multi-record writes",
    version="0.1.0",
    lifespan=lifespan,
)


# ============================================================================
# Error Mapping
# ============================================================================

@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.info("Rejected request %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error("Storage failure on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(HiscoresError)
async def hiscores_error_handler(request: Request, exc: HiscoresError):
    logger.error("Hiscores failure on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=502, content={"error": exc.message})


# ============================================================================
# Endpoints
# ============================================================================

# 오류 본문 스키마 (OpenAPI 문서용)
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "잘못된 요청"},
    500: {"model": ErrorResponse, "description": "저장소 쓰기 실패"},
}


@app.post(
    "/goals",
    response_model=GoalResponse,
    status_code=201,
    responses={**ERROR_RESPONSES, 502: {"model": ErrorResponse, "description": "Hiscores 조회 실패"}},
)
def create_goal(request: GoalCreationRequest, service: GoalService = Depends(get_service)):
    """목표 생성 (메타데이터 + 초기 진행도 레코드 3개를 원자적으로 기록)"""
    logger.info(
        "Creating goal for user: %s, character: %s", request.user_id, request.character_name
    )
    goal = service.create_goal(request.to_goal())
    return GoalResponse.from_goal(goal)


@app.post("/goals/progress", response_model=MessageResponse, responses=ERROR_RESPONSES)
def create_goal_progress(request: GoalProgressRequest, service: GoalService = Depends(get_service)):
    """진행도 기록 (타임라인 항목 추가 + latest 마커 갱신)"""
    logger.info(
        "Creating goal progress for user: %s, character: %s, goalId: %s",
        request.user_id, request.character_name, request.goal_id,
    )
    service.record_progress_event(request.to_event())
    return MessageResponse(message="Goal progress created successfully")


@app.get("/health")
def health_check():
    """헬스 체크"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    # 개발 서버 실행
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
