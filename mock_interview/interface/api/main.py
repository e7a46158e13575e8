from datetime import timedelta

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from ...application.session_store import SessionStore
from ...application.transcript_store import JsonTranscriptStore
from ...core.config import Settings, get_settings
from ...core.exceptions import InterviewError
from ...core.interfaces import LanguageModel, TranscriptStore
from ...core.logging import setup_logging
from ...managers.evaluator import AnswerEvaluator
from ...managers.interview import InterviewManager
from ...managers.llm import OpenAILanguageModel
from ...managers.questions import QuestionBank
from ...managers.summary import SummaryComposer

logger = structlog.get_logger(__name__)


def build_interview_manager(settings: Settings,
                            language_model: LanguageModel,
                            transcript_store: TranscriptStore) -> InterviewManager:
    subject = settings.INTERVIEW_SUBJECT
    return InterviewManager(
        store=SessionStore(),
        question_bank=QuestionBank(language_model, subject),
        evaluator=AnswerEvaluator(language_model, subject),
        composer=SummaryComposer(language_model, subject),
        transcripts=transcript_store,
        time_limit=timedelta(minutes=settings.SESSION_TIME_LIMIT_MINUTES),
    )


def create_app(settings: Settings | None = None,
               language_model: LanguageModel | None = None,
               transcript_store: TranscriptStore | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    # Raises ConfigurationError when no API key is configured
    language_model = language_model or OpenAILanguageModel(settings)
    transcript_store = transcript_store or JsonTranscriptStore(settings.TRANSCRIPTS_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version="0.1.0"
    )
    app.state.settings = settings
    app.state.interview_manager = build_interview_manager(settings, language_model, transcript_store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InterviewError)
    async def interview_error_handler(request: Request, exc: InterviewError):
        logger.info("request_rejected", path=request.url.path, status=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    from .routers import interview, health
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(interview.router, prefix=settings.API_PREFIX)

    if settings.STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.STATIC_DIR), html=True), name="static")
    else:
        logger.debug("static_dir_missing", path=str(settings.STATIC_DIR))

    return app
