class ResumeMailerError(Exception):
    """Base class for errors that map onto a JSON ``{"message": ...}`` response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedInputError(ResumeMailerError):
    status_code = 400
    default_message = "Malformed input"


class UploadError(ResumeMailerError):
    status_code = 400
    default_message = "No file uploaded"


class ContextNotFoundError(ResumeMailerError):
    status_code = 404
    default_message = "Applicant context not found"


class ContextStoreError(ResumeMailerError):
    status_code = 503
    default_message = "Applicant context store unavailable"


class ObjectNotFoundError(ResumeMailerError):
    status_code = 404
    default_message = "File not found"


class ObjectStoreError(ResumeMailerError):
    status_code = 500
    default_message = "Object store request failed"


class GenerationError(ResumeMailerError):
    status_code = 502
    default_message = "Text generation failed"


class GenerationTimeoutError(GenerationError):
    status_code = 504
    default_message = "Text generation timed out"
