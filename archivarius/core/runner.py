"""
Job Runner: 비동기 세션을 background thread에서 실행.

동시 실행 job 수는 max_workers로 제한됨.
빈 worker가 없으면 세션은 created 상태로 대기.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from archivarius.core.operations import Operation
from archivarius.core.sessions import JobSession
from archivarius.domain.constants import DEFAULT_MAX_WORKERS
from archivarius.domain.schemas import ArchiveRequest, OperationResult

logger = logging.getLogger(__name__)


class JobRunner:
    """ThreadPoolExecutor 기반 job 실행기."""

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            msg = f"max_workers must be positive, got {max_workers}"
            raise ValueError(msg)
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="archivarius-job",
        )

    def launch(
        self,
        session: JobSession,
        request: ArchiveRequest,
        operation: Operation,
    ) -> Future[OperationResult]:
        """세션 실행 예약. 호출 즉시 반환."""
        logger.debug(f"Launching session {session.session_id}: {operation.value}")
        return self._executor.submit(session.run, request, operation)

    def shutdown(self, wait: bool = True) -> None:
        """실행 중/대기 중인 job 완료 후 종료 (wait=True)."""
        self._executor.shutdown(wait=wait)
