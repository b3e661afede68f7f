"""AWS Transcribe implementation of the TranscriptionJobService interface."""

from botocore.exceptions import BotoCoreError, ClientError

from flashcard_api.domain.models import JobStatus, TranscriptionJobStatus
from flashcard_api.exceptions import PollError, SubmissionError
from flashcard_api.logging import setup_logging

from .interfaces import TranscriptionJobService

logger = setup_logging()

# QUEUED jobs have not started yet but are not terminal either.
_STATUS_MAP = {
    "QUEUED": JobStatus.IN_PROGRESS,
    "IN_PROGRESS": JobStatus.IN_PROGRESS,
    "COMPLETED": JobStatus.COMPLETED,
    "FAILED": JobStatus.FAILED,
}


class AWSTranscribeJobService(TranscriptionJobService):
    """Runs batch transcription jobs on AWS Transcribe."""

    def __init__(self, client):
        """
        Args:
            client: A boto3 "transcribe" client.
        """
        self._client = client

    def submit(
        self,
        job_name: str,
        language_code: str,
        sample_rate_hertz: int,
        media_format: str,
        media_uri: str,
    ) -> None:
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                LanguageCode=language_code,
                MediaSampleRateHertz=sample_rate_hertz,
                MediaFormat=media_format,
                Media={"MediaFileUri": media_uri},
            )
            logger.info(
                "Transcription job started",
                extra={"job_name": job_name, "media_uri": media_uri},
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "AWS Transcribe job submission failed",
                extra={"job_name": job_name},
            )
            raise SubmissionError(job_name, e) from e

    def get_status(self, job_name: str) -> TranscriptionJobStatus:
        try:
            response = self._client.get_transcription_job(TranscriptionJobName=job_name)
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "AWS Transcribe status check failed",
                extra={"job_name": job_name},
            )
            raise PollError(job_name, e) from e

        job = response.get("TranscriptionJob", {})
        raw_status = job.get("TranscriptionJobStatus")
        status = _STATUS_MAP.get(raw_status)
        if status is None:
            raise PollError(
                job_name, ValueError(f"unknown transcription job status {raw_status!r}")
            )

        return TranscriptionJobStatus(
            job_name=job_name,
            status=status,
            result_uri=job.get("Transcript", {}).get("TranscriptFileUri"),
            failure_reason=job.get("FailureReason"),
        )
