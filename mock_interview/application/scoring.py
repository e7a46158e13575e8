from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .interview_session import QUESTION_COUNT, InterviewSession, ResponseRecord


@dataclass(frozen=True)
class ScoreReport:
    per_question_scores: Tuple[float, ...]
    total_score: float


def slot_score(responses: Iterable[ResponseRecord], question_id: int) -> float:
    """Average of the non-zero scores recorded for one slot.

    Only the first main answer of the slot counts; every follow-up answer
    counts. A score of exactly 0 is treated as "no data" and left out of the
    average, so a slot holding only zeros (or nothing) scores 0.
    """
    main = None
    followup_scores: List[float] = []
    for response in responses:
        if response.question_id != question_id:
            continue
        if response.is_followup:
            followup_scores.append(response.evaluation.score)
        elif main is None:
            main = response

    scores = [main.evaluation.score if main else 0.0, *followup_scores]
    scores = [score for score in scores if score > 0]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def aggregate(session: InterviewSession) -> ScoreReport:
    per_question = tuple(slot_score(session.responses, i) for i in range(QUESTION_COUNT))
    return ScoreReport(per_question_scores=per_question, total_score=sum(per_question))
