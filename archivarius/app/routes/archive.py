"""
Archive Routes: 압축/해제 요청 (sync + async).

- POST   /api/v1/compress                         → 동기 압축
- POST   /api/v1/extract                          → 동기 해제
- POST   /api/v1/{compress|extract}/async         → 세션 생성 + background 실행
- GET    /api/v1/{compress|extract}/async?session_id=...  → 상태/결과 조회
- DELETE /api/v1/{compress|extract}/async?session_id=...  → 세션 제거

규칙:
- 라우트는 얇게: 파싱/응답 변환만, 실행은 core에 위임
- 동기 경로도 blocking I/O → threadpool에서 실행 (event loop 차단 금지)
"""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from archivarius.core.operations import Operation, execute
from archivarius.core.runner import JobRunner
from archivarius.core.sessions import SessionManager
from archivarius.domain.constants import RESPONSE_OK
from archivarius.domain.schemas import ArchiveRequest, JobStatus

api_router = APIRouter()


class ArchiveRequestBody(BaseModel):
    """요청 JSON: {"file", "dir", "filter"?, "limit"?}."""

    file: str = Field(..., min_length=1, description="아카이브 파일 경로")
    dir: str = Field(..., min_length=1, description="소스/대상 디렉터리")
    filter: str | None = Field(None, description="basename glob 필터")
    limit: int = Field(0, ge=0, description="최대 파일 수 (0 = 기본값)")

    def to_request(self) -> ArchiveRequest:
        return ArchiveRequest(
            archive_name=Path(self.file),
            directory=Path(self.dir),
            filter=self.filter or None,
            limit=self.limit,
        )


def get_sessions(request: Request) -> SessionManager:
    """Request에서 SessionManager 가져오기."""
    return request.app.state.sessions


def get_runner(request: Request) -> JobRunner:
    """Request에서 JobRunner 가져오기."""
    return request.app.state.runner


# =============================================================================
# Sync API
# =============================================================================


@api_router.post("/compress")
async def compress_archive(payload: ArchiveRequestBody) -> JSONResponse:
    """동기 압축: 완료될 때까지 대기 후 결과 반환."""
    return await _process_sync(payload, Operation.COMPRESS)


@api_router.post("/extract")
async def extract_archive(payload: ArchiveRequestBody) -> JSONResponse:
    """동기 해제: 완료될 때까지 대기 후 결과 반환."""
    return await _process_sync(payload, Operation.EXTRACT)


async def _process_sync(payload: ArchiveRequestBody, operation: Operation) -> JSONResponse:
    result = await run_in_threadpool(execute, operation, payload.to_request())
    return JSONResponse(status_code=result.status_code, content=result.to_response())


# =============================================================================
# Async API (Sessions)
# =============================================================================


@api_router.post("/{operation}/async")
async def start_async(
    request: Request,
    operation: Operation,
    payload: ArchiveRequestBody,
) -> dict[str, Any]:
    """
    비동기 작업 시작.

    세션 생성 → runner에 예약 → session_id 즉시 반환.
    """
    session_id, session = get_sessions(request).create_session()
    get_runner(request).launch(session, payload.to_request(), operation)

    return {"session_id": session_id, "status": RESPONSE_OK}


@api_router.get("/{operation}/async")
async def get_async(
    request: Request,
    operation: Operation,
    session_id: str = Query(..., min_length=1),
) -> dict[str, Any]:
    """
    세션 상태 조회.

    finished일 때만 result 포함.
    """
    session = get_sessions(request).get(session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail={"code": "SESSION_NOT_FOUND", "message": f"Session '{session_id}' not found"},
        )

    status, result = session.result()
    body: dict[str, Any] = {"status": status.value}
    if status is JobStatus.FINISHED and result is not None:
        body["result"] = result.to_dict()
    return body


@api_router.delete("/{operation}/async")
async def delete_async(
    request: Request,
    operation: Operation,
    session_id: str = Query(..., min_length=1),
) -> dict[str, Any]:
    """세션 제거. 없는 ID도 200 (이미 실행 중인 job은 계속 실행됨)."""
    get_sessions(request).delete(session_id)
    return {"status": RESPONSE_OK}
