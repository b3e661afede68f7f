"""Infrastructure layer exports."""

from .aws_transcribe import AWSTranscribeJobService
from .http_result_fetcher import HttpResultFetcher
from .minio_storage import MinioStorage
from .polly_synthesizer import PollySpeechSynthesizer
from .vision_labeler import GoogleVisionLabeler

__all__ = [
    "AWSTranscribeJobService",
    "HttpResultFetcher",
    "MinioStorage",
    "PollySpeechSynthesizer",
    "GoogleVisionLabeler",
]
