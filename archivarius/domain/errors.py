"""
Error definitions for the archive engine.

규칙:
- 조용한 실패 금지 → ArchiveError로 명시적 실패
- 재시도 없음: 첫 번째 실패에서 즉시 중단 (fail-fast)
- 모든 에러는 code로 분류 → OperationResult로 변환
"""

from typing import Any


class ArchiveError(Exception):
    """
    압축/해제 작업 중 발생하는 에러.

    code로 분류되며, status class와 HTTP 코드는 code에서 결정됨:
    - INVALID_FILTER, INPUT_NOT_FOUND, CREATE_ERROR, OPEN_ERROR, FORMAT_ERROR
      → client-error (400)
    - ARCHIVE_IO_ERROR → server-error (500)

    Usage:
        raise ArchiveError(ErrorCodes.CREATE_ERROR, path=str(path), cause=str(e))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    @property
    def is_client_error(self) -> bool:
        return self.code in CLIENT_ERROR_CODES

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Request ===
    INVALID_FILTER = "INVALID_FILTER"  # glob 패턴 오류

    # === Input ===
    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"  # 소스 디렉터리 없음

    # === Output ===
    CREATE_ERROR = "CREATE_ERROR"  # 대상 디렉터리/파일 생성 실패 (주로 권한)

    # === Container ===
    OPEN_ERROR = "OPEN_ERROR"  # 아카이브 열기 실패 (없음/읽기 불가)
    FORMAT_ERROR = "FORMAT_ERROR"  # ZIP 형식 아님, 손상, 잘못된 엔트리 이름

    # === I/O ===
    ARCHIVE_IO_ERROR = "ARCHIVE_IO_ERROR"  # 작업 도중 읽기/쓰기 실패


CLIENT_ERROR_CODES = frozenset({
    ErrorCodes.INVALID_FILTER,
    ErrorCodes.INPUT_NOT_FOUND,
    ErrorCodes.CREATE_ERROR,
    ErrorCodes.OPEN_ERROR,
    ErrorCodes.FORMAT_ERROR,
})
