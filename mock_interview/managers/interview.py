from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

import structlog

from ..application.interview_session import InterviewSession, ResponseRecord
from ..application.scoring import aggregate
from ..application.session_store import SessionStore, utc_now
from ..core.exceptions import ValidationError
from ..core.interfaces import TranscriptStore
from .evaluator import AnswerEvaluator
from .questions import QuestionBank
from .summary import SummaryComposer

logger = structlog.get_logger(__name__)

CLOSING_MESSAGE = "Thank you for taking the test and we'll contact you if you get selected."


@dataclass(frozen=True)
class SessionOutcome:
    message: str
    transcript: Dict[str, Any]


class InterviewManager:
    """Drives interviews from start to transcript.

    Answers and the closing summary for one session are serialized on the
    session's lock; different sessions proceed independently.
    """

    def __init__(self,
                 store: SessionStore,
                 question_bank: QuestionBank,
                 evaluator: AnswerEvaluator,
                 composer: SummaryComposer,
                 transcripts: TranscriptStore,
                 time_limit: timedelta = timedelta(minutes=30),
                 clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.question_bank = question_bank
        self.evaluator = evaluator
        self.composer = composer
        self.transcripts = transcripts
        self.time_limit = time_limit
        self.clock = clock

    async def start_session(self, name: Optional[str], topic: Optional[str]) -> InterviewSession:
        if not name or not topic:
            raise ValidationError("Missing name or topic")
        questions = await self.question_bank.generate(topic)
        return self.store.create(name, topic, questions)

    async def submit_answer(self,
                            session_id: str,
                            question_id: int,
                            answer: Optional[str],
                            is_followup: bool = False,
                            followup_index: Optional[int] = None) -> List[str]:
        """Evaluate and record one answer.

        Returns the slot's installed follow-up questions after a main answer,
        and an empty list after a follow-up answer.
        """
        answer = answer or ""
        session = self.store.get(session_id)
        async with session.lock:
            # the session may have been closed while this request waited
            session = self.store.get(session_id)
            if session.elapsed(self.clock()) > self.time_limit and not answer.strip():
                raise ValidationError("Time up")

            question = session.resolve_question(question_id, is_followup, followup_index)
            evaluation = await self.evaluator.evaluate(question, answer)

            if not is_followup and session.install_followups(question_id, evaluation.followups):
                logger.info("followups_installed", session_id=session_id, question_id=question_id,
                            count=len(session.followups[question_id]))

            session.record(ResponseRecord(
                question_id=question_id,
                answer=answer,
                evaluation=evaluation.without_followups(),
                is_followup=is_followup,
                followup_index=followup_index if is_followup else None,
            ))
            logger.info("answer_recorded", session_id=session_id, question_id=question_id,
                        is_followup=is_followup, score=evaluation.score)

            if is_followup:
                return []
            return list(session.followups[question_id])

    async def end_session(self, session_id: str) -> SessionOutcome:
        session = self.store.get(session_id)
        async with session.lock:
            session = self.store.get(session_id)
            report = aggregate(session)
            transcript = await self.composer.compose(session, report)
            await self.transcripts.append(transcript)
            self.store.delete(session_id)

        logger.info("session_closed", session_id=session_id, total_score=report.total_score,
                    responses=len(session.responses))
        return SessionOutcome(message=CLOSING_MESSAGE, transcript=transcript)
