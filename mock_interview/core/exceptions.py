class InterviewError(Exception):
    """Base error for interview operations, carrying an HTTP-equivalent status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InterviewError):
    """Missing or invalid request fields."""

    status_code = 400


class NotFoundError(InterviewError):
    """Unknown or already closed session id."""

    status_code = 404

    def __init__(self, session_id: str) -> None:
        super().__init__("No session")
        self.session_id = session_id


class UpstreamModelError(InterviewError):
    """The language model call failed or returned nothing usable.

    Never reaches a caller of the API: question generation, answer evaluation
    and summary composition all replace it with fixed fallback content.
    """

    status_code = 502

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class ConfigurationError(InterviewError):
    """Startup-fatal configuration problem, e.g. a missing API key."""
