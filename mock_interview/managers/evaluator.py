import math
from numbers import Real

import structlog

from ..application.interview_session import MAX_FOLLOWUPS, Evaluation
from ..core.interfaces import LanguageModel
from .llm import request_json
from .prompts import evaluate_answer_prompt

logger = structlog.get_logger(__name__)

FALLBACK_EVALUATION = Evaluation(
    score=5.0,
    justification="Fallback evaluation",
    improvement="Fallback improvement",
    example_answer="Fallback example",
)


def round_score(score: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(score * 10 + 0.5) / 10


class AnswerEvaluator:
    """Scores one answer with the language model.

    Anything other than a JSON object carrying a numeric score in [0, 10] is
    replaced by FALLBACK_EVALUATION.
    """

    def __init__(self, model: LanguageModel, subject: str = "Excel"):
        self.model = model
        self.subject = subject

    async def evaluate(self, question: str, answer: str) -> Evaluation:
        result = await request_json(self.model, evaluate_answer_prompt(self.subject, question, answer))
        evaluation = self.normalize(result)
        if evaluation is FALLBACK_EVALUATION:
            logger.warning("evaluation_fallback", question=question)
        return evaluation

    @staticmethod
    def normalize(result) -> Evaluation:
        if not isinstance(result, dict):
            return FALLBACK_EVALUATION
        score = result.get("score")
        if isinstance(score, bool) or not isinstance(score, Real) or math.isnan(score) \
                or not 0 <= score <= 10:
            return FALLBACK_EVALUATION

        return Evaluation(
            score=min(10.0, max(0.0, round_score(float(score)))),
            justification=_text(result.get("justification")),
            improvement=_text(result.get("improvement")),
            example_answer=_text(result.get("example_answer")),
            followups=_followups(result.get("followups")),
        )


def _text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _followups(value) -> tuple:
    if not isinstance(value, list):
        return ()
    cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return tuple(cleaned[:MAX_FOLLOWUPS])
