"""
Core layer: 아카이브 엔진 + 세션 상태 머신.

역할:
- 파일 선택 (filter → 크기 정렬 → limit)
- ZIP 압축/해제
- 비동기 job 세션, 레지스트리, 실행기

HTTP/JSON은 모름 (app 레이어 담당).
"""

from .compressor import compress, write_archive
from .extractor import extract
from .ids import generate_session_id
from .operations import Operation, execute
from .pattern import compile_filter, matches
from .runner import JobRunner
from .selector import select_files
from .sessions import JobSession, SessionManager

__all__ = [
    # selector
    "select_files",
    # pattern
    "compile_filter",
    "matches",
    # compressor / extractor
    "compress",
    "write_archive",
    "extract",
    # operations
    "Operation",
    "execute",
    # sessions
    "JobSession",
    "SessionManager",
    "JobRunner",
    # ids
    "generate_session_id",
]
