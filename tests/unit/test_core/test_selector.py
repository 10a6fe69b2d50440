"""
test_selector.py - 파일 선택 정책 테스트

DoD:
- 선택 수 = min(N, limit), 가장 큰 파일들
- 크기 1..12, 기본 limit → 3..12 (가장 작은 1, 2 제외)
- 같은 크기는 나열(이름) 순서 유지
- 하위 디렉터리 제외, 재귀 없음
- filter는 크기 순위와 무관하게 적용
"""

from pathlib import Path

import pytest

from archivarius.core.selector import resolve_limit, select_files
from archivarius.domain.constants import DEFAULT_MAX_FILES
from archivarius.domain.errors import ArchiveError, ErrorCodes

# =============================================================================
# 크기 순위 + limit
# =============================================================================


class TestRanking:
    """크기 내림차순 선택."""

    def test_default_limit_drops_two_smallest(self, src_dir: Path):
        """크기 1..12 → 3..12 선택."""
        selection = select_files(src_dir)

        assert [c.size for c in selection] == list(range(12, 2, -1))

    def test_fewer_files_than_limit(self, tmp_path: Path, make_files):
        """파일 2개 → 2개 모두."""
        directory = make_files(tmp_path / "src", [1, 4])

        selection = select_files(directory)

        assert [c.name for c in selection] == ["four.txt", "one.txt"]

    def test_exactly_default_limit(self, tmp_path: Path, make_files):
        """파일 10개 → 10개 모두."""
        directory = make_files(tmp_path / "src", list(range(1, 11)))

        assert len(select_files(directory)) == 10

    def test_explicit_limit(self, tmp_path: Path, make_files):
        """limit=3 → 가장 큰 3개."""
        directory = make_files(tmp_path / "src", [5, 6, 7, 8])

        selection = select_files(directory, limit=3)

        assert [c.size for c in selection] == [8, 7, 6]

    @pytest.mark.parametrize("limit", [None, 0, -1])
    def test_non_positive_limit_uses_default(self, src_dir: Path, limit):
        """0 이하/None → 기본값 10."""
        assert len(select_files(src_dir, limit=limit)) == DEFAULT_MAX_FILES

    def test_limit_larger_than_file_count(self, src_dir: Path):
        """limit > N → N개."""
        assert len(select_files(src_dir, limit=100)) == 12

    def test_ties_keep_name_order(self, tmp_path: Path):
        """같은 크기 → 이름순 나열 순서 유지 (stable)."""
        directory = tmp_path / "ties"
        directory.mkdir()
        for name in ["delta", "alpha", "charlie", "bravo"]:
            (directory / name).write_bytes(b"xx")
        (directory / "zulu").write_bytes(b"xxxx")

        selection = select_files(directory)

        assert [c.name for c in selection] == ["zulu", "alpha", "bravo", "charlie", "delta"]

    def test_candidate_fields(self, src_dir: Path):
        """CandidateFile: name, size, path."""
        top = select_files(src_dir, limit=1)[0]

        assert top.name == "twelve.txt"
        assert top.size == 12
        assert top.path == src_dir / "twelve.txt"


# =============================================================================
# 디렉터리 처리
# =============================================================================


class TestDirectoryHandling:
    """하위 디렉터리/빈 디렉터리/없는 디렉터리."""

    def test_subdirectories_skipped(self, tmp_path: Path, make_files):
        """하위 디렉터리와 그 안의 파일은 제외."""
        directory = make_files(tmp_path / "src", [5, 8])
        (directory / "inner").mkdir()
        (directory / "inner" / "inner1.txt").write_bytes(b"inner")
        (directory / "inner" / "inner").mkdir()
        (directory / "inner" / "inner" / "inner2.txt").write_bytes(b"double inner")

        selection = select_files(directory)

        assert [c.name for c in selection] == ["eight.txt", "five.txt"]

    def test_empty_directory(self, tmp_path: Path):
        """빈 디렉터리 → 빈 선택."""
        directory = tmp_path / "empty"
        directory.mkdir()

        assert select_files(directory) == []

    def test_missing_directory(self, tmp_path: Path):
        """없는 디렉터리 → INPUT_NOT_FOUND."""
        with pytest.raises(ArchiveError) as exc_info:
            select_files(tmp_path / "nope")

        assert exc_info.value.code == ErrorCodes.INPUT_NOT_FOUND

    def test_file_instead_of_directory(self, tmp_path: Path):
        """디렉터리가 아닌 경로 → INPUT_NOT_FOUND."""
        path = tmp_path / "file.txt"
        path.write_bytes(b"x")

        with pytest.raises(ArchiveError) as exc_info:
            select_files(path)

        assert exc_info.value.code == ErrorCodes.INPUT_NOT_FOUND


# =============================================================================
# 필터
# =============================================================================


class TestFilter:
    """glob 필터."""

    def test_filter_by_extension(self, tmp_path: Path, make_files, json_file):
        """*.txt → .json 제외 (가장 크더라도)."""
        directory = make_files(tmp_path / "src", [1, 2, 3])
        name, data = json_file
        (directory / name).write_bytes(data)

        selection = select_files(directory, filter="*.txt")

        assert [c.name for c in selection] == ["three.txt", "two.txt", "one.txt"]

    def test_filter_applied_before_limit(self, src_dir: Path):
        """필터 통과 파일 중에서 limit 적용 (작은 파일도 포함 가능)."""
        selection = select_files(src_dir, filter="[ot]*", limit=10)

        # one(1), two(2), three(3), ten(10), twelve(12)
        assert [c.size for c in selection] == [12, 10, 3, 2, 1]

    def test_filter_no_match(self, src_dir: Path):
        """매칭 없음 → 빈 선택."""
        assert select_files(src_dir, filter="*.bin") == []

    def test_malformed_filter_before_io(self, tmp_path: Path):
        """잘못된 패턴은 디렉터리 접근 전에 INVALID_FILTER."""
        with pytest.raises(ArchiveError) as exc_info:
            select_files(tmp_path / "does-not-exist", filter="[")

        assert exc_info.value.code == ErrorCodes.INVALID_FILTER


class TestResolveLimit:
    """limit 기본값 처리."""

    @pytest.mark.parametrize(
        ("limit", "expected"),
        [(None, 10), (0, 10), (-5, 10), (1, 1), (25, 25)],
    )
    def test_resolve_limit(self, limit, expected):
        assert resolve_limit(limit) == expected
