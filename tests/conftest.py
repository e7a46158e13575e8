# tests/conftest.py
import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from mock_interview.core.exceptions import UpstreamModelError
from mock_interview.core.interfaces import LanguageModel

QUESTIONS = [f"Finance question {i}?" for i in range(1, 11)]


class ScriptedModel(LanguageModel):
    """Replays queued replies in order; an exception in the queue is raised.

    When the queue runs dry every call fails like an unreachable provider.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.replies:
            raise UpstreamModelError("no scripted reply", provider="test")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if not isinstance(reply, str):
            reply = json.dumps(reply)
        return reply


def evaluation(score, followups=(), **overrides):
    data = {
        "score": score,
        "justification": f"justified {score}",
        "improvement": f"improve {score}",
        "example_answer": f"example {score}",
        "followups": list(followups),
    }
    data.update(overrides)
    return data


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def test_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "testing")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("APP_NAME", "Mock Interview Test")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    from mock_interview.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(test_env_vars, tmp_path):
    """Get test settings."""
    from mock_interview.core.config import get_settings
    settings = get_settings()
    settings.TRANSCRIPTS_FILE = tmp_path / "transcripts.json"
    settings.STATIC_DIR = tmp_path / "public"
    return settings


@pytest.fixture
def model():
    return ScriptedModel()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def transcript_store(tmp_path):
    from mock_interview.application.transcript_store import JsonTranscriptStore
    return JsonTranscriptStore(tmp_path / "transcripts.json")


@pytest.fixture
def manager(model, transcript_store, clock):
    from mock_interview.application.session_store import SessionStore
    from mock_interview.managers.evaluator import AnswerEvaluator
    from mock_interview.managers.interview import InterviewManager
    from mock_interview.managers.questions import QuestionBank
    from mock_interview.managers.summary import SummaryComposer
    return InterviewManager(
        store=SessionStore(clock=clock),
        question_bank=QuestionBank(model),
        evaluator=AnswerEvaluator(model),
        composer=SummaryComposer(model),
        transcripts=transcript_store,
        clock=clock,
    )


@pytest.fixture
def app(settings, model, transcript_store):
    """Create test app instance."""
    from mock_interview.interface.api.main import create_app
    return create_app(settings, language_model=model, transcript_store=transcript_store)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
