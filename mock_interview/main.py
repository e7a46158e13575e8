import sys

import structlog

from .core.exceptions import ConfigurationError
from .interface.api.main import create_app

logger = structlog.get_logger(__name__)

try:
    app = create_app()
except ConfigurationError as e:
    logger.error("startup_failed", error=e.message)
    sys.exit(1)
