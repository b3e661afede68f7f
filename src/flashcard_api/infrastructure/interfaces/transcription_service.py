"""Abstract interface for batch speech-to-text job operations."""

from abc import ABC, abstractmethod

from flashcard_api.domain.models import TranscriptionJobStatus


class TranscriptionJobService(ABC):
    """Abstract base class for batch transcription backends."""

    @abstractmethod
    def submit(
        self,
        job_name: str,
        language_code: str,
        sample_rate_hertz: int,
        media_format: str,
        media_uri: str,
    ) -> None:
        """
        Starts a transcription job.

        Args:
            job_name: Unique job name, reused later to check the job.
            language_code: BCP-47 language tag of the audio.
            sample_rate_hertz: Sample rate of the audio.
            media_format: Container format of the audio, e.g. "mp3".
            media_uri: Object storage URI of the audio file.

        Raises:
            SubmissionError: If the job cannot be created.
        """
        pass

    @abstractmethod
    def get_status(self, job_name: str) -> TranscriptionJobStatus:
        """
        Reads the current state of a transcription job.

        Args:
            job_name: The name the job was submitted under.

        Returns:
            The job status and, once completed, its result location.

        Raises:
            PollError: If the status cannot be read.
        """
        pass
