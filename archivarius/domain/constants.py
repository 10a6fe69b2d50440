"""
Domain Constants: 서비스 전역 상수.

선택 정책, API 경로, 세션 상태 문자열 등.
"""

# =============================================================================
# Selection Policy (선택 정책)
# =============================================================================
# filter → size 내림차순 정렬 → limit 개수만큼 선택
# limit이 0 또는 없으면 DEFAULT_MAX_FILES 사용 (압축 시)
# 해제 시 limit 0 = 제한 없음

DEFAULT_MAX_FILES = 10

# =============================================================================
# Container Format (ZIP)
# =============================================================================

# 엔트리에 권한 비트가 없을 때 사용할 기본 모드
DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o755

# 스트리밍 복사 버퍼 크기
COPY_BUFFER_SIZE = 64 * 1024

# =============================================================================
# API
# =============================================================================

API_PREFIX = "/api/v1"

RESPONSE_OK = "ok"
RESPONSE_NOK = "nok"

# =============================================================================
# Config Defaults (default.yaml 없을 때)
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = "INFO"
