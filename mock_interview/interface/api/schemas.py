from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StartSessionRequest(BaseModel):
    name: Optional[str] = None
    topic: Optional[str] = None


class StartSessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    questions: List[str]


class AnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    question_id: int = Field(alias="questionId")
    answer: Optional[str] = ""
    is_followup: bool = Field(default=False, alias="isFollowup")
    followup_index: Optional[int] = Field(default=None, alias="followupIndex")


class AnswerResponse(BaseModel):
    ok: bool = True
    followups: List[str]


class SummaryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")


class SummaryResponse(BaseModel):
    ok: bool = True
    message: str
