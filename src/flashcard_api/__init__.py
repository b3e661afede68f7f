from flashcard_api.config import AppConfig, load_config
from flashcard_api.exceptions import (
    FetchError,
    JobFailedError,
    ParseError,
    PollError,
    SubmissionError,
    TranscriptionCancelledError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from flashcard_api.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "TranscriptionError",
    "SubmissionError",
    "PollError",
    "JobFailedError",
    "FetchError",
    "ParseError",
    "TranscriptionTimeoutError",
    "TranscriptionCancelledError",
]
