"""Domain layer exports."""

from .models import JobStatus, MediaFormat, TranscriptionJobStatus, TranscriptionRequest

__all__ = ["JobStatus", "MediaFormat", "TranscriptionJobStatus", "TranscriptionRequest"]
