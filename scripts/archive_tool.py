#!/usr/bin/env python3
"""
archive_tool.py - 서버 없이 압축/해제 실행

HTTP 동기 경로와 동일한 엔진/분류를 사용:
- compress: 디렉터리의 큰 파일부터 limit개(기본 10)를 ZIP으로
- extract: ZIP 엔트리를 저장 순서대로 디렉터리에 복원 (limit 0 = 전부)

사용법:
    # 압축 (*.log 중 가장 큰 5개)
    uv run python scripts/archive_tool.py compress --file out/logs.zip --dir /var/log/app --filter "*.log" --limit 5

    # 해제
    uv run python scripts/archive_tool.py extract --file out/logs.zip --dir restored/
"""

import argparse
import logging
from pathlib import Path

from archivarius.core.operations import Operation, execute
from archivarius.domain.schemas import ArchiveRequest

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type: 0 이상 정수."""
    number = int(value)
    if number < 0:
        msg = f"must be non-negative: {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="디렉터리 ↔ ZIP 아카이브 압축/해제",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="실행할 작업",
    )
    parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="아카이브 파일 경로",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        required=True,
        help="소스(compress) 또는 대상(extract) 디렉터리",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default=None,
        help='파일명 glob 필터 (예: "*.txt")',
    )
    parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=0,
        help="최대 파일 수 (0: compress는 10, extract는 제한 없음)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    operation = Operation(args.operation)
    request = ArchiveRequest(
        archive_name=args.file,
        directory=args.dir,
        filter=args.filter,
        limit=args.limit,
    )

    result = execute(operation, request)
    if not result.ok:
        logger.error(f"{operation.value} 실패: {result.message}")
        return 1

    logger.info(f"{operation.value} 완료: {args.file}")
    return 0


if __name__ == "__main__":
    exit(main())
