import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, Sequence, Set

import structlog

from ..core.exceptions import NotFoundError
from .interview_session import InterviewSession

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore:
    """Holds the active interview sessions of one application instance.

    Lookups, creation and removal are guarded by a lock so different ids can
    be used from concurrent requests. Ids are never handed out twice.
    """

    def __init__(self,
                 id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
                 clock: Callable[[], datetime] = utc_now):
        self._sessions: Dict[str, InterviewSession] = {}
        self._issued: Set[str] = set()
        self._lock = threading.Lock()
        self._id_factory = id_factory
        self._clock = clock

    def create(self, name: str, topic: str, questions: Sequence[str]) -> InterviewSession:
        with self._lock:
            session_id = self._id_factory()
            while session_id in self._issued:
                session_id = self._id_factory()
            self._issued.add(session_id)
            session = InterviewSession(
                id=session_id,
                name=name,
                topic=topic,
                questions=tuple(questions),
                start_time=self._clock(),
            )
            self._sessions[session_id] = session
        logger.info("session_created", session_id=session_id, topic=topic)
        return session

    def get(self, session_id: str) -> InterviewSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("session_deleted", session_id=session_id)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
