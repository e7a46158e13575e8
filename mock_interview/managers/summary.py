from dataclasses import dataclass
from typing import Any, Dict

import structlog

from ..application.interview_session import InterviewSession
from ..application.scoring import ScoreReport
from ..core.interfaces import LanguageModel
from .llm import request_json
from .prompts import summary_prompt

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Narrative:
    verdict: str
    pros: str
    cons: str
    areas_of_improvement: str


def fallback_narrative(total_score: float) -> Narrative:
    return Narrative(
        verdict=f"Candidate performance was average with a total score of {total_score:.1f}/100",
        pros="Fallback pros",
        cons="Fallback cons",
        areas_of_improvement="Fallback areas",
    )


class SummaryComposer:
    """Closes an interview: asks the model for a verdict and shapes the
    transcript record that gets persisted."""

    def __init__(self, model: LanguageModel, subject: str = "Excel"):
        self.model = model
        self.subject = subject

    async def compose(self, session: InterviewSession, report: ScoreReport) -> Dict[str, Any]:
        narrative = await self.narrate(session, report.total_score)
        return build_transcript(session, report, narrative)

    async def narrate(self, session: InterviewSession, total_score: float) -> Narrative:
        exchanges = [
            (session.question_text(r), r.answer, r.evaluation.to_dict())
            for r in session.responses
        ]
        prompt = summary_prompt(self.subject, session.topic, session.all_questions(), exchanges)
        result = await request_json(self.model, prompt)

        if not isinstance(result, dict) or not isinstance(result.get("verdict"), str):
            logger.warning("summary_fallback", session_id=session.id)
            return fallback_narrative(total_score)

        return Narrative(
            verdict=f"{result['verdict']} Total score: {total_score:.1f}/100",
            pros=str(result.get("pros") or ""),
            cons=str(result.get("cons") or ""),
            areas_of_improvement=str(result.get("areas_of_improvement") or ""),
        )


def response_key(question_id: int, followup_index=None) -> str:
    """``Q3`` for the third base question, ``Q3.2`` for its second follow-up."""
    key = f"Q{question_id + 1}"
    if followup_index is not None:
        key = f"{key}.{followup_index + 1}"
    return key


def build_transcript(session: InterviewSession, report: ScoreReport, narrative: Narrative) -> Dict[str, Any]:
    transcript: Dict[str, Any] = {
        "Name": session.name,
        "Topic": session.topic,
        "Total Score": round(report.total_score, 1),
        "Final Verdict": narrative.verdict,
        "Areas of improvement": narrative.areas_of_improvement,
        "Pros": narrative.pros,
        "Cons": narrative.cons,
        "Questions": {},
        "Candidate Answers": {},
        "LLM Answers": {},
        "Evaluations": {},
    }
    # sorted() is stable, so answers to one slot keep their arrival order
    for response in sorted(session.responses, key=lambda r: r.question_id):
        key = response_key(response.question_id, response.followup_index if response.is_followup else None)
        suffix = key[1:]
        transcript["Questions"][key] = session.question_text(response)
        transcript["Candidate Answers"][f"A{suffix}"] = response.answer
        transcript["LLM Answers"][f"L{suffix}"] = response.evaluation.example_answer
        transcript["Evaluations"][f"E{suffix}"] = {
            "score": response.evaluation.score,
            "justification": response.evaluation.justification,
            "improvement": response.evaluation.improvement,
        }
    return transcript
