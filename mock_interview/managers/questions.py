from typing import List

import structlog

from ..application.interview_session import QUESTION_COUNT
from ..core.interfaces import LanguageModel
from .llm import request_json
from .prompts import FALLBACK_QUESTIONS, generate_questions_prompt

logger = structlog.get_logger(__name__)


class QuestionBank:
    def __init__(self, model: LanguageModel, subject: str = "Excel"):
        self.model = model
        self.subject = subject

    async def generate(self, topic: str) -> List[str]:
        """Ten questions for the topic; the built-in list when the model falls short."""
        questions = await request_json(self.model, generate_questions_prompt(self.subject, topic))
        if self._is_valid(questions):
            return [q.strip() for q in questions]

        logger.warning("question_generation_fallback", topic=topic)
        return list(FALLBACK_QUESTIONS)

    @staticmethod
    def _is_valid(questions) -> bool:
        return (
            isinstance(questions, list)
            and len(questions) == QUESTION_COUNT
            and all(isinstance(q, str) and q.strip() for q in questions)
        )
