from fastapi import APIRouter, Depends, Request

from ....managers.interview import InterviewManager
from ..schemas import (
    AnswerRequest,
    AnswerResponse,
    StartSessionRequest,
    StartSessionResponse,
    SummaryRequest,
    SummaryResponse,
)

router = APIRouter(tags=["interview"])


def get_interview_manager(request: Request) -> InterviewManager:
    return request.app.state.interview_manager


@router.post("/start-session", response_model=StartSessionResponse)
async def start_session(body: StartSessionRequest,
                        manager: InterviewManager = Depends(get_interview_manager)):
    """Open an interview and hand out its ten questions."""
    session = await manager.start_session(body.name, body.topic)
    return StartSessionResponse(session_id=session.id, questions=list(session.questions))


@router.post("/answer", response_model=AnswerResponse)
async def submit_answer(body: AnswerRequest,
                        manager: InterviewManager = Depends(get_interview_manager)):
    followups = await manager.submit_answer(
        body.session_id,
        body.question_id,
        body.answer,
        is_followup=body.is_followup,
        followup_index=body.followup_index,
    )
    return AnswerResponse(followups=followups)


@router.post("/summary", response_model=SummaryResponse)
async def end_session(body: SummaryRequest,
                      manager: InterviewManager = Depends(get_interview_manager)):
    """Score the interview, persist its transcript and close it."""
    outcome = await manager.end_session(body.session_id)
    return SummaryResponse(message=outcome.message)
