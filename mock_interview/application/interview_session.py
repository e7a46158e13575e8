import asyncio
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from ..core.exceptions import ValidationError

QUESTION_COUNT = 10
MAX_FOLLOWUPS = 5


@dataclass(frozen=True)
class Evaluation:
    score: float
    justification: str
    improvement: str
    example_answer: str
    followups: Tuple[str, ...] = ()

    def without_followups(self) -> "Evaluation":
        return replace(self, followups=())

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "justification": self.justification,
            "improvement": self.improvement,
            "example_answer": self.example_answer,
        }


@dataclass(frozen=True)
class ResponseRecord:
    question_id: int
    answer: str
    evaluation: Evaluation
    is_followup: bool = False
    followup_index: Optional[int] = None


@dataclass(frozen=True, eq=False)
class InterviewSession:
    """One candidate's interview: ten fixed slots, each with at most one
    installed list of follow-up questions, and an append-only answer log.

    Identity fields are frozen; only the follow-up slots and the answer log
    change during the interview."""

    id: str
    name: str
    topic: str
    questions: Tuple[str, ...]
    start_time: datetime
    followups: List[List[str]] = field(default_factory=lambda: [[] for _ in range(QUESTION_COUNT)])
    responses: List[ResponseRecord] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))
        if len(self.questions) != QUESTION_COUNT:
            raise ValueError(f"A session needs exactly {QUESTION_COUNT} questions, got {len(self.questions)}")

    def elapsed(self, now: datetime) -> timedelta:
        return now - self.start_time

    def resolve_question(self, question_id: int, is_followup: bool = False,
                         followup_index: Optional[int] = None) -> str:
        """Return the text of the base question or installed follow-up being answered."""
        if isinstance(question_id, bool) or not isinstance(question_id, int) \
                or not 0 <= question_id < QUESTION_COUNT:
            raise ValidationError("Invalid question")
        if not is_followup:
            return self.questions[question_id]

        slot = self.followups[question_id]
        if isinstance(followup_index, bool) or not isinstance(followup_index, int) \
                or not 0 <= followup_index < len(slot):
            raise ValidationError("Invalid question")
        return slot[followup_index]

    def install_followups(self, question_id: int, followups) -> bool:
        # First non-empty list wins; later lists for the slot are ignored.
        if not followups or self.followups[question_id]:
            return False
        self.followups[question_id] = list(followups)[:MAX_FOLLOWUPS]
        return True

    def record(self, response: ResponseRecord) -> None:
        self.responses.append(response)

    def question_text(self, response: ResponseRecord) -> str:
        if response.is_followup:
            return self.followups[response.question_id][response.followup_index]
        return self.questions[response.question_id]

    def all_questions(self) -> List[str]:
        """Base questions followed by every installed follow-up, in slot order."""
        reading_list = list(self.questions)
        for slot in self.followups:
            reading_list.extend(slot)
        return reading_list
