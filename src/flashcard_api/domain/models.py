"""Domain models for speech-to-text transcription."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MediaFormat(str, Enum):
    """Audio container formats accepted by the transcription service."""

    MP3 = "mp3"
    MP4 = "mp4"
    WAV = "wav"
    FLAC = "flac"
    OGG = "ogg"
    AMR = "amr"
    WEBM = "webm"
    M4A = "m4a"


class JobStatus(str, Enum):
    """Lifecycle states of an external transcription job."""

    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class TranscriptionRequest(BaseModel):
    """A request to transcribe an audio file already in object storage."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    key: str = Field(min_length=1)
    media_format: MediaFormat
    media_sample_rate_hertz: int = Field(gt=0)


class TranscriptionJobStatus(BaseModel, frozen=True):
    """Snapshot of an external transcription job as observed by one status check."""

    job_name: str
    status: JobStatus
    result_uri: str | None = None
    failure_reason: str | None = None
