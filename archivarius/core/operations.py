"""
Operation dispatch: 어떤 작업을 실행할지 (압축/해제).

SessionManager와 JobSession은 어떤 작업인지 모름 → Operation 값만 전달받음.
"""

import logging
from enum import Enum

from archivarius.core.compressor import compress
from archivarius.core.extractor import extract
from archivarius.domain.errors import ArchiveError
from archivarius.domain.schemas import ArchiveRequest, OperationResult, StatusClass

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """실행할 아카이브 작업."""

    COMPRESS = "compress"
    EXTRACT = "extract"

    def run(self, request: ArchiveRequest) -> int:
        """
        작업 실행 (blocking).

        Returns:
            처리된 파일 수

        Raises:
            ArchiveError
        """
        if self is Operation.COMPRESS:
            return compress(request)
        return extract(request)


def execute(operation: Operation, request: ArchiveRequest) -> OperationResult:
    """
    작업 실행 후 분류된 결과 반환.

    sync 경로와 async(세션) 경로가 모두 이 함수를 사용 → 동일한 분류 보장.
    """
    try:
        operation.run(request)
    except ArchiveError as e:
        logger.warning(f"{operation.value} failed: {e}")
        return OperationResult.from_error(e)
    except Exception as e:
        logger.exception(f"{operation.value} crashed")
        return OperationResult(
            status_class=StatusClass.SERVER_ERROR,
            message=f"unable to process ({e})",
        )

    return OperationResult.success()
