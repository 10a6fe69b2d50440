"""
File Selector: 압축 대상 파일 선택.

선택 정책:
1. 디렉터리 바로 아래 항목만 (재귀 없음), 일반 파일만
2. filter가 있으면 basename이 glob에 매칭되는 파일만
3. 크기 내림차순 (같은 크기는 이름순 나열 순서 유지 → stable sort)
4. 앞에서부터 limit개 (0/None → DEFAULT_MAX_FILES)
"""

import logging
import os
from pathlib import Path

from archivarius.core.pattern import compile_filter, matches
from archivarius.domain.constants import DEFAULT_MAX_FILES
from archivarius.domain.errors import ArchiveError, ErrorCodes
from archivarius.domain.schemas import CandidateFile

logger = logging.getLogger(__name__)


def resolve_limit(limit: int | None) -> int:
    """0 이하 또는 None → 기본값."""
    if limit is None or limit <= 0:
        return DEFAULT_MAX_FILES
    return limit


def select_files(
    directory: Path,
    filter: str | None = None,
    limit: int | None = None,
) -> list[CandidateFile]:
    """
    압축할 파일 목록 선택.

    Args:
        directory: 소스 디렉터리
        filter: basename에 적용할 glob 패턴
        limit: 최대 파일 수 (0/None → 10)

    Returns:
        크기 내림차순으로 정렬된 CandidateFile 목록 (최대 limit개)

    Raises:
        ArchiveError: INVALID_FILTER, INPUT_NOT_FOUND, ARCHIVE_IO_ERROR
    """
    # 패턴 검증은 I/O 전에
    compiled = compile_filter(filter)
    max_files = resolve_limit(limit)

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.INPUT_NOT_FOUND,
            directory=str(directory),
            cause=str(e),
        ) from e

    candidates: list[CandidateFile] = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
            size = entry.stat().st_size
        except OSError as e:
            raise ArchiveError(
                ErrorCodes.ARCHIVE_IO_ERROR,
                file=entry.name,
                cause=str(e),
            ) from e

        if not matches(compiled, entry.name):
            continue

        candidates.append(CandidateFile(name=entry.name, size=size, path=Path(entry.path)))

    # sort()는 stable → 같은 크기는 이름순 유지
    candidates.sort(key=lambda c: c.size, reverse=True)
    selected = candidates[:max_files]

    logger.debug(
        f"Selected {len(selected)}/{len(candidates)} files from {directory} "
        f"(filter={filter!r}, limit={max_files})"
    )
    return selected
