"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn archivarius.app.main:app --reload
- 프로덕션: uv run python -m archivarius.app.main
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

# Routes
from archivarius.app.routes import archive
from archivarius.core.runner import JobRunner
from archivarius.core.sessions import SessionManager
from archivarius.domain.constants import (
    API_PREFIX,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PORT,
    RESPONSE_NOK,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    우선순위: 인자 → ARCHIVARIUS_CONFIG 환경변수 → 프로젝트 루트의 default.yaml
    파일이 없으면 빈 dict (기본값 사용).
    """
    if config_path is None:
        env_path = os.environ.get("ARCHIVARIUS_CONFIG")
        if env_path and env_path.strip():
            config_path = Path(env_path)
        else:
            config_path = Path(__file__).parent.parent.parent / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def configure_logging(config: dict) -> None:
    """logging 레벨/포맷 설정."""
    level = config.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 세션 레지스트리/job runner 생성
    종료 시: 실행 중인 job 완료 대기
    """
    # Startup
    config = load_config()
    configure_logging(config)

    max_workers = config.get("jobs", {}).get("max_workers", DEFAULT_MAX_WORKERS)
    app.state.config = config
    app.state.sessions = SessionManager()
    app.state.runner = JobRunner(max_workers=max_workers)
    logger.info(f"Archive service started (max_workers={max_workers})")

    yield

    # Shutdown
    await run_in_threadpool(app.state.runner.shutdown, wait=True)
    logger.info("Archive service stopped")


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Archivarius",
    description="디렉터리 → 크기 순위 ZIP 아카이브 압축/해제",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """잘못된 요청 형식 → 400 (422 대신)."""
    return JSONResponse(
        status_code=400,
        content={
            "status": RESPONSE_NOK,
            "message": f"incorrect request format ({exc.errors()})",
        },
    )


# =============================================================================
# Routes
# =============================================================================

app.include_router(archive.api_router, prefix=API_PREFIX, tags=["Archive API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = load_config().get("server", {})
    uvicorn.run(
        "archivarius.app.main:app",
        host=server_config.get("host", DEFAULT_HOST),
        port=server_config.get("port", DEFAULT_PORT),
    )
