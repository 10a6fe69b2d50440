"""
Job Session 관리: 비동기 작업의 상태와 결과.

규칙:
- 상태 전이: created → started → finished (건너뛰기/역행 금지)
- finished와 result는 세션 락 아래에서 한 번에 기록
  → finished를 관측한 poller는 항상 result도 관측
- 세션 상태를 변경하는 것은 그 세션을 실행하는 단 하나의 runner뿐
- 레지스트리 락은 dict 구조만 보호 (세션 내부 상태는 세션 락이 보호)
"""

import logging
import threading

from archivarius.core.ids import generate_session_id
from archivarius.core.operations import Operation, execute
from archivarius.domain.schemas import ArchiveRequest, JobStatus, OperationResult, StatusClass

logger = logging.getLogger(__name__)


class JobSession:
    """비동기 작업 하나의 상태 머신 + 결과 보관."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self._status = JobStatus.CREATED
        self._result: OperationResult | None = None
        self._lock = threading.Lock()

    @property
    def status(self) -> JobStatus:
        with self._lock:
            return self._status

    def is_finished(self) -> bool:
        return self.status is JobStatus.FINISHED

    def run(self, request: ArchiveRequest, operation: Operation) -> OperationResult:
        """
        작업 실행 (background thread에서 호출).

        Args:
            request: 아카이브 요청
            operation: 실행할 작업

        Returns:
            기록된 최종 결과

        Raises:
            RuntimeError: 이미 시작된 세션을 다시 실행하려는 경우
        """
        with self._lock:
            if self._status is not JobStatus.CREATED:
                msg = f"Session {self.session_id} already {self._status.value}"
                raise RuntimeError(msg)
            self._status = JobStatus.STARTED

        logger.debug(f"Session {self.session_id} started: {operation.value}")

        try:
            result = execute(operation, request)
        except Exception as e:
            # 미분류 예외도 finished로 끝나야 poller가 무한 대기하지 않음
            logger.exception(f"Session {self.session_id} crashed")
            result = OperationResult(
                status_class=StatusClass.SERVER_ERROR,
                message=f"unable to process ({e})",
            )

        with self._lock:
            self._result = result
            self._status = JobStatus.FINISHED

        logger.debug(f"Session {self.session_id} finished: {result.status_class.value}")
        return result

    def result(self) -> tuple[JobStatus, OperationResult | None]:
        """
        (status, result) 스냅샷.

        status가 FINISHED가 아니면 result는 None.
        """
        with self._lock:
            return self._status, self._result


class SessionManager:
    """
    세션 레지스트리.

    애플리케이션이 하나를 생성해서 소유 (app.state.sessions).
    세션 생성만 하고 실행은 호출자 책임 (JobRunner.launch).
    """

    def __init__(self) -> None:
        self._sessions: dict[str, JobSession] = {}
        self._lock = threading.Lock()

    def create_session(self) -> tuple[str, JobSession]:
        """새 세션 등록 (status=created)."""
        with self._lock:
            session_id = generate_session_id()
            while session_id in self._sessions:
                session_id = generate_session_id()

            session = JobSession(session_id)
            self._sessions[session_id] = session

        logger.debug(f"Session {session_id} created")
        return session_id, session

    def get(self, session_id: str) -> JobSession | None:
        """세션 조회 (없으면 None)."""
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """
        세션 제거.

        이미 실행 중인 runner는 자신의 세션 객체로 계속 실행됨 (조회만 불가).

        Returns:
            제거되었으면 True, 없던 ID면 False
        """
        with self._lock:
            removed = self._sessions.pop(session_id, None)

        if removed is not None:
            logger.debug(f"Session {session_id} deleted")
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
