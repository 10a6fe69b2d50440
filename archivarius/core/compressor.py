"""
Archive Builder: 선택된 파일을 ZIP 아카이브로 기록.

동작:
- filter 검증 → 파일 선택 → 상위 디렉터리 생성 → 아카이브 생성(덮어쓰기)
- 선택 순서(크기 내림차순) 그대로 엔트리 추가
- 엔트리 이름: basename (아카이브 이식성)
- 첫 번째 실패에서 중단, 이미 기록된 부분 아카이브는 그대로 남음
"""

import logging
import shutil
import zipfile
from collections.abc import Sequence
from pathlib import Path

from archivarius.core.selector import select_files
from archivarius.domain.constants import COPY_BUFFER_SIZE
from archivarius.domain.errors import ArchiveError, ErrorCodes
from archivarius.domain.schemas import ArchiveRequest, CandidateFile

logger = logging.getLogger(__name__)


def compress(request: ArchiveRequest) -> int:
    """
    디렉터리의 파일을 크기 순위로 선택해 아카이브 생성.

    Args:
        request: archive_name, directory, filter, limit

    Returns:
        아카이브에 기록된 파일 수

    Raises:
        ArchiveError: INVALID_FILTER, INPUT_NOT_FOUND, CREATE_ERROR, ARCHIVE_IO_ERROR
    """
    selection = select_files(request.directory, request.filter, request.limit)
    write_archive(selection, request.archive_name)

    logger.info(
        f"Compressed {len(selection)} files from {request.directory} "
        f"into {request.archive_name}"
    )
    return len(selection)


def write_archive(selection: Sequence[CandidateFile], archive_path: Path) -> None:
    """
    선택 목록을 순서대로 ZIP에 기록.

    빈 선택 → 비어 있지만 열 수 있는 ZIP.

    Raises:
        ArchiveError: CREATE_ERROR, ARCHIVE_IO_ERROR
    """
    archive_path = Path(archive_path)
    try:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.CREATE_ERROR,
            path=str(archive_path.parent),
            cause=f"unable to create parent directory for archive ({e})",
        ) from e

    try:
        archive_file = open(archive_path, "wb")
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.CREATE_ERROR,
            path=str(archive_path),
            cause=f"unable to create archive file ({e})",
        ) from e

    # 닫을 때 버퍼 flush + central directory 기록 → 여기서도 OSError 가능
    try:
        with archive_file, zipfile.ZipFile(
            archive_file, mode="w", compression=zipfile.ZIP_DEFLATED
        ) as zf:
            for candidate in selection:
                _add_entry(zf, candidate)
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.ARCHIVE_IO_ERROR,
            archive=str(archive_path),
            cause=f"unable to write archive ({e})",
        ) from e


def _add_entry(zf: zipfile.ZipFile, candidate: CandidateFile) -> None:
    """소스 파일 하나를 엔트리로 스트리밍 (권한 비트/mtime 포함)."""
    try:
        info = zipfile.ZipInfo.from_file(
            candidate.path, arcname=candidate.name, strict_timestamps=False
        )
        info.compress_type = zipfile.ZIP_DEFLATED

        with open(candidate.path, "rb") as src, zf.open(info, mode="w") as dst:
            shutil.copyfileobj(src, dst, COPY_BUFFER_SIZE)
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.ARCHIVE_IO_ERROR,
            file=candidate.name,
            cause=f"unable to compress file ({e})",
        ) from e
