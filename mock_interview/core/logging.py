import structlog
import logging
from .config import Settings, EnvironmentType

def resolve_log_level(settings: Settings) -> int:
    """LOG_LEVEL when it names a level, else INFO in production and DEBUG elsewhere."""
    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.strip().upper())
        if isinstance(level, int):
            return level
    return logging.INFO if settings.ENVIRONMENT == EnvironmentType.PRODUCTION else logging.DEBUG

def setup_logging(settings: Settings) -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.ENVIRONMENT == EnvironmentType.DEVELOPMENT:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(settings)),
        cache_logger_on_first_use=False,
    )
