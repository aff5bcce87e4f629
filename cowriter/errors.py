# FILE: cowriter/errors.py
class CoWriterError(Exception):
    """Base class for CoWriter backend errors."""

    status_code = 500


class InvalidInputError(CoWriterError):
    """Caller sent something unusable (empty text, blank message)."""

    status_code = 400


class LLMNotConnectedError(CoWriterError):
    status_code = 400

    def __init__(self, message: str = "No LLM connected. Please connect to an LLM first."):
        super().__init__(message)


class LLMCallError(CoWriterError):
    """The provider answered with an error or could not be reached."""

    status_code = 502
