"""
Pytest fixtures for the archive tests.

테스트 구성:
- 소스 디렉터리: 크기 1..12 바이트 파일 (이름 = 숫자 영어 표기)
- 앱: 라우터 + app.state (sessions, runner) 직접 구성
"""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from archivarius.app.main import request_validation_handler
from archivarius.app.routes.archive import api_router
from archivarius.core.runner import JobRunner
from archivarius.core.sessions import SessionManager
from archivarius.domain.constants import API_PREFIX

# =============================================================================
# File Fixtures
# =============================================================================

# 크기(바이트) → 파일명
SIZED_FILES = {
    1: "one.txt",
    2: "two.txt",
    3: "three.txt",
    4: "four.txt",
    5: "five.txt",
    6: "six.txt",
    7: "seven.txt",
    8: "eight.txt",
    9: "nine.txt",
    10: "ten.txt",
    11: "eleven.txt",
    12: "twelve.txt",
}

JSON_FILE = ("uno.json", b'["blue", "green"]')


def sized_content(size: int) -> bytes:
    """'1234567890...' 형태의 size 바이트."""
    return "".join(str((i + 1) % 10) for i in range(size)).encode()


@pytest.fixture
def sized_files() -> dict[int, str]:
    """크기 → 파일명 매핑."""
    return dict(SIZED_FILES)


@pytest.fixture
def content_of() -> Callable[[int], bytes]:
    """크기 → 파일 내용."""
    return sized_content


@pytest.fixture
def json_file() -> tuple[str, bytes]:
    """필터 테스트용 비-.txt 파일 (이름, 내용)."""
    return JSON_FILE


@pytest.fixture
def make_files() -> Callable[[Path, list[int]], Path]:
    """지정한 크기의 파일들을 디렉터리에 생성하는 헬퍼."""

    def _make(directory: Path, sizes: list[int]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for size in sizes:
            (directory / SIZED_FILES[size]).write_bytes(sized_content(size))
        return directory

    return _make


@pytest.fixture
def src_dir(tmp_path: Path, make_files) -> Path:
    """크기 1..12 파일 12개가 있는 소스 디렉터리."""
    return make_files(tmp_path / "src", list(SIZED_FILES))


@pytest.fixture
def dst_dir(tmp_path: Path) -> Path:
    """해제 대상 디렉터리 (아직 없음)."""
    return tmp_path / "dst"


@pytest.fixture
def archive_path(tmp_path: Path) -> Path:
    """아카이브 경로 (상위 디렉터리 아직 없음)."""
    return tmp_path / "out" / "archive.zip"


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    """테스트용 FastAPI 앱."""
    app = FastAPI()
    app.include_router(api_router, prefix=API_PREFIX)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.state.config = {}
    app.state.sessions = SessionManager()
    app.state.runner = JobRunner(max_workers=2)

    yield app

    app.state.runner.shutdown(wait=True)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """테스트 클라이언트."""
    return TestClient(app)
