"""Infrastructure interface exports."""

from .image_labeler import ImageLabeler
from .result_fetcher import ResultFetcher
from .speech_synthesizer import SpeechSynthesizer
from .storage import StorageClient
from .transcription_service import TranscriptionJobService

__all__ = [
    "ImageLabeler",
    "ResultFetcher",
    "SpeechSynthesizer",
    "StorageClient",
    "TranscriptionJobService",
]
