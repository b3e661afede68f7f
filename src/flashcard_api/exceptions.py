"""Custom exceptions for the flashcard API."""

from uuid import UUID

from fastapi import HTTPException


class TranscriptionError(Exception):
    """Base class for every terminal failure of a transcription job."""

    def __init__(
        self, job_name: str | None, message: str, cause: Exception | None = None
    ):
        self.job_name = job_name
        self.cause = cause
        super().__init__(message)


class SubmissionError(TranscriptionError):
    """Raised when the transcription job cannot be created."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        super().__init__(
            job_name, f"Failed to submit transcription job '{job_name}'", cause
        )


class PollError(TranscriptionError):
    """Raised when the status of a transcription job cannot be read."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        super().__init__(
            job_name, f"Failed to check status of transcription job '{job_name}'", cause
        )


class JobFailedError(TranscriptionError):
    """Raised when the transcription service reports the job as failed."""

    def __init__(self, job_name: str, reason: str | None = None):
        self.reason = reason
        super().__init__(job_name, f"Transcription job '{job_name}' failed")


class FetchError(TranscriptionError):
    """Raised when the transcription result cannot be downloaded."""

    def __init__(
        self,
        uri: str | None,
        cause: Exception | None = None,
        job_name: str | None = None,
    ):
        self.uri = uri
        # Result URIs are presigned; the query string carries the signature.
        location = uri.split("?", 1)[0] if uri else uri
        super().__init__(
            job_name, f"Failed to fetch transcription result from '{location}'", cause
        )


class ParseError(TranscriptionError):
    """Raised when the downloaded transcription result is not a JSON object."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        super().__init__(
            job_name, f"Failed to parse result of transcription job '{job_name}'", cause
        )


class TranscriptionTimeoutError(TranscriptionError):
    """Raised when the wait budget runs out while the job is still running."""

    def __init__(self, job_name: str, max_wait_seconds: int):
        self.max_wait_seconds = max_wait_seconds
        super().__init__(
            job_name,
            f"Transcription job '{job_name}' did not finish "
            f"within {max_wait_seconds} checks",
        )


class TranscriptionCancelledError(TranscriptionError):
    """Raised when the caller goes away while the job is being polled."""

    def __init__(self, job_name: str):
        super().__init__(job_name, f"Waiting for transcription job '{job_name}' was cancelled")


class StorageUploadError(Exception):
    """Raised when file upload to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class SpeechSynthesisError(Exception):
    """Raised when the text-to-speech service call fails."""

    def __init__(self, voice_id: str, cause: Exception | None = None):
        self.voice_id = voice_id
        self.cause = cause
        super().__init__(f"Failed to synthesize speech with voice '{voice_id}'")


class ImageLabelingError(Exception):
    """Raised when the image labeling service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class CardSetNotFoundError(Exception):
    """Raised when a requested card set does not exist."""

    def __init__(self, card_set_id: UUID):
        self.card_set_id = card_set_id
        super().__init__(f"Card set {card_set_id} not found")


class CardSetPersistenceError(Exception):
    """Raised when reading or writing card sets fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Card set {operation} failed")


class ApiError(HTTPException):
    """HTTP error rendered as an ErrorResponse with alternative messages."""

    def __init__(self, status_code: int, message: str, *alt_messages: str):
        super().__init__(status_code=status_code, detail=message)
        self.alt_messages = list(alt_messages)
