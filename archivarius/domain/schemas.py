"""
Data schemas for the archive engine.

규칙:
- ArchiveRequest: core 입력 (HTTP 파싱은 app 레이어 담당)
- OperationResult: sync/async 모두 동일한 분류 결과
- JobStatus: created → started → finished (단조 증가, 역행 금지)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from archivarius.domain.constants import RESPONSE_NOK, RESPONSE_OK
from archivarius.domain.errors import ArchiveError

# =============================================================================
# Status Enums
# =============================================================================


class StatusClass(str, Enum):
    """작업 결과 분류."""

    SUCCESS = "success"
    CLIENT_ERROR = "client-error"
    SERVER_ERROR = "server-error"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    StatusClass.SUCCESS: 200,
    StatusClass.CLIENT_ERROR: 400,
    StatusClass.SERVER_ERROR: 500,
}


class JobStatus(str, Enum):
    """
    Job 세션 상태.

    전이 순서는 고정: CREATED → STARTED → FINISHED
    """

    CREATED = "created"
    STARTED = "started"
    FINISHED = "finished"


# =============================================================================
# Request / Selection
# =============================================================================


@dataclass(frozen=True)
class ArchiveRequest:
    """
    압축/해제 요청.

    - archive_name: 아카이브 파일 경로
    - directory: 압축 시 소스 디렉터리, 해제 시 대상 디렉터리
    - filter: 파일명에 적용할 glob (선택)
    - limit: 최대 파일 수 (0/None → 압축 시 기본값 10, 해제 시 무제한)
    """

    archive_name: Path
    directory: Path
    filter: str | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            msg = f"limit must be non-negative, got {self.limit}"
            raise ValueError(msg)


@dataclass(frozen=True)
class CandidateFile:
    """선택된 소스 파일 (Selector → Builder)."""

    name: str
    size: int
    path: Path


# =============================================================================
# Operation Result
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """
    압축/해제 작업 결과.

    status_class가 SUCCESS가 아니면 message와 error_code가 채워짐.
    """

    status_class: StatusClass
    message: str | None = None
    error_code: str | None = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(status_class=StatusClass.SUCCESS)

    @classmethod
    def from_error(cls, error: ArchiveError) -> "OperationResult":
        """ArchiveError → 분류된 결과."""
        status_class = (
            StatusClass.CLIENT_ERROR if error.is_client_error else StatusClass.SERVER_ERROR
        )
        return cls(
            status_class=status_class,
            message=f"unable to process ({error})",
            error_code=error.code,
        )

    @property
    def ok(self) -> bool:
        return self.status_class is StatusClass.SUCCESS

    @property
    def status_code(self) -> int:
        return self.status_class.http_status

    def to_response(self) -> dict[str, Any]:
        """API 응답 본문 ({"status": "ok"|"nok", "message"?})."""
        response: dict[str, Any] = {"status": RESPONSE_OK if self.ok else RESPONSE_NOK}
        if self.message:
            response["message"] = self.message
        return response

    def to_dict(self) -> dict[str, Any]:
        """비동기 조회 응답의 result 필드."""
        return {
            "status_code": self.status_code,
            "response": self.to_response(),
        }
