"""
Archive Reader/Extractor: ZIP 엔트리를 디렉터리로 복원.

동작:
- 저장 순서 그대로 처리 (재정렬 없음, Builder가 크기 내림차순으로 기록)
- 엔트리 이름은 basename만 사용 → 대상 디렉터리 밖으로 나갈 수 없음
- filter는 모든 엔트리의 basename에 적용 (디렉터리 마커 포함)
- 디렉터리 마커 → 빈 디렉터리 생성, limit에 포함되지 않음
- limit: 0/None → 제한 없음
"""

import logging
import os
import shutil
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from archivarius.core.pattern import compile_filter, matches
from archivarius.domain.constants import COPY_BUFFER_SIZE, DEFAULT_FILE_MODE
from archivarius.domain.errors import ArchiveError, ErrorCodes
from archivarius.domain.schemas import ArchiveRequest

logger = logging.getLogger(__name__)

_UNSAFE_NAMES = frozenset({"", ".", ".."})


def extract(request: ArchiveRequest) -> int:
    """
    아카이브를 request.directory로 해제.

    Args:
        request: archive_name, directory, filter, limit

    Returns:
        해제된 파일 수 (디렉터리 마커 제외)

    Raises:
        ArchiveError: INVALID_FILTER, OPEN_ERROR, FORMAT_ERROR, CREATE_ERROR, ARCHIVE_IO_ERROR
    """
    compiled = compile_filter(request.filter)
    max_files = request.limit or 0
    destination = Path(request.directory)

    zf = _open_archive(Path(request.archive_name))
    with zf:
        _make_dir(destination)

        count = 0
        for info in zf.infolist():
            name = PurePosixPath(info.filename).name
            if name in _UNSAFE_NAMES:
                raise ArchiveError(
                    ErrorCodes.FORMAT_ERROR,
                    archive=str(request.archive_name),
                    entry=info.filename,
                    cause="unsafe entry name",
                )
            if not matches(compiled, name):
                continue

            if info.is_dir():
                _make_dir(destination / name)
                continue

            if max_files and count >= max_files:
                continue

            _extract_entry(zf, info, destination / name)
            count += 1

    logger.info(f"Extracted {count} files from {request.archive_name} into {destination}")
    return count


def _open_archive(archive_path: Path) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(archive_path, mode="r")
    except (zipfile.BadZipFile, NotImplementedError, ValueError, EOFError) as e:
        # NotImplementedError: 손상된 central directory의 버전 필드
        raise ArchiveError(
            ErrorCodes.FORMAT_ERROR,
            archive=str(archive_path),
            cause=str(e),
        ) from e
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.OPEN_ERROR,
            archive=str(archive_path),
            cause=f"unable to open archive ({e})",
        ) from e


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.CREATE_ERROR,
            path=str(path),
            cause=str(e),
        ) from e


def _entry_mode(info: zipfile.ZipInfo) -> int:
    """엔트리에 저장된 권한 비트 (없으면 기본값)."""
    mode = (info.external_attr >> 16) & 0o777
    return mode or DEFAULT_FILE_MODE


def _extract_entry(zf: zipfile.ZipFile, info: zipfile.ZipInfo, target: Path) -> None:
    """엔트리 하나를 target 파일로 스트리밍 (생성/truncate)."""
    _make_dir(target.parent)

    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _entry_mode(info))
    except OSError as e:
        raise ArchiveError(
            ErrorCodes.CREATE_ERROR,
            path=str(target),
            cause=f"unable to create file ({e})",
        ) from e

    with open(fd, "wb") as dst:
        try:
            with zf.open(info, mode="r") as src:
                shutil.copyfileobj(src, dst, COPY_BUFFER_SIZE)
        except (
            OSError,
            EOFError,
            zipfile.BadZipFile,
            zlib.error,
            RuntimeError,
            NotImplementedError,
        ) as e:
            # RuntimeError: 암호화된 엔트리, NotImplementedError: 미지원 압축 방식, EOFError: 잘린 payload
            raise ArchiveError(
                ErrorCodes.ARCHIVE_IO_ERROR,
                entry=info.filename,
                cause=str(e),
            ) from e
