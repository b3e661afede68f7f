"""Drives a speech-to-text job from submission to a terminal outcome."""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

from flashcard_api.domain import JobStatus, TranscriptionRequest
from flashcard_api.exceptions import (
    FetchError,
    JobFailedError,
    ParseError,
    TranscriptionCancelledError,
    TranscriptionTimeoutError,
)
from flashcard_api.infrastructure.interfaces import (
    ResultFetcher,
    TranscriptionJobService,
)
from flashcard_api.logging import setup_logging

logger = setup_logging()

CancellationCheck = Callable[[], Awaitable[bool]]


def parse_result(job_name: str, data: bytes) -> dict[str, Any]:
    """
    Parses a downloaded transcription result.

    Raises:
        ParseError: If the data is not a JSON object.
    """
    try:
        payload = json.loads(data)
    except ValueError as e:
        raise ParseError(job_name, e) from e

    if not isinstance(payload, dict):
        raise ParseError(
            job_name, TypeError(f"expected a JSON object, got {type(payload).__name__}")
        )
    return payload


class TranscriptionOrchestrator:
    """
    Submits a transcription job and waits for its result.

    The external service owns the job state; this class only observes it.
    Status is checked at a fixed interval, at most once per second of the
    caller's wait budget, and every failure is reported once without retry.
    Blocking SDK calls run in worker threads so a waiting request never holds
    up the event loop.
    """

    def __init__(
        self,
        job_service: TranscriptionJobService,
        result_fetcher: ResultFetcher,
        bucket_name: str,
        language_code: str = "en-US",
        poll_interval_seconds: float = 1.0,
        media_uri_scheme: str = "s3",
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._job_service = job_service
        self._result_fetcher = result_fetcher
        self._bucket_name = bucket_name
        self._language_code = language_code
        self._poll_interval_seconds = poll_interval_seconds
        self._media_uri_scheme = media_uri_scheme
        self._sleep = sleep

    def media_uri(self, key: str) -> str:
        """Returns the object storage URI the service reads the audio from."""
        return f"{self._media_uri_scheme}://{self._bucket_name}/{key}"

    async def run(
        self,
        request: TranscriptionRequest,
        max_wait_seconds: int,
        is_cancelled: CancellationCheck | None = None,
    ) -> dict[str, Any]:
        """
        Submits a job named after the request key and waits for its result.

        Args:
            request: The validated transcription request.
            max_wait_seconds: Maximum number of status checks, one per interval.
            is_cancelled: Awaitable predicate checked before every status check.

        Returns:
            The parsed transcription result.

        Raises:
            SubmissionError: If the job cannot be created.
            PollError: If a status check fails.
            JobFailedError: If the service reports the job as failed.
            FetchError: If the result cannot be downloaded.
            ParseError: If the result is not a JSON object.
            TranscriptionTimeoutError: If the budget runs out first.
            TranscriptionCancelledError: If the caller cancels while waiting.
        """
        media_uri = self.media_uri(request.key)
        logger.info(
            "Submitting transcription job",
            extra={
                "job_name": request.key,
                "media_uri": media_uri,
                "media_format": request.media_format.value,
                "sample_rate_hertz": request.media_sample_rate_hertz,
            },
        )

        await asyncio.to_thread(
            self._job_service.submit,
            job_name=request.key,
            language_code=self._language_code,
            sample_rate_hertz=request.media_sample_rate_hertz,
            media_format=request.media_format.value,
            media_uri=media_uri,
        )

        return await self.await_result(request.key, max_wait_seconds, is_cancelled)

    async def await_result(
        self,
        job_name: str,
        max_wait_seconds: int,
        is_cancelled: CancellationCheck | None = None,
    ) -> dict[str, Any]:
        """Polls an already submitted job and returns its parsed result."""
        for attempt in range(1, max_wait_seconds + 1):
            if is_cancelled is not None and await is_cancelled():
                logger.info(
                    "Transcription wait cancelled",
                    extra={"job_name": job_name, "attempt": attempt},
                )
                raise TranscriptionCancelledError(job_name)

            job = await asyncio.to_thread(self._job_service.get_status, job_name)

            if job.status == JobStatus.COMPLETED:
                logger.info(
                    "Transcription job completed",
                    extra={"job_name": job_name, "attempt": attempt},
                )
                return await self._fetch_result(job_name, job.result_uri)

            if job.status == JobStatus.FAILED:
                logger.error(
                    "Transcription job failed",
                    extra={"job_name": job_name, "reason": job.failure_reason},
                )
                raise JobFailedError(job_name, job.failure_reason)

            await self._sleep(self._poll_interval_seconds)

        logger.warning(
            "Transcription job still running after wait budget",
            extra={"job_name": job_name, "max_wait_seconds": max_wait_seconds},
        )
        raise TranscriptionTimeoutError(job_name, max_wait_seconds)

    async def _fetch_result(self, job_name: str, result_uri: str | None) -> dict[str, Any]:
        if not result_uri:
            raise FetchError(
                result_uri,
                ValueError("job completed without a result location"),
                job_name=job_name,
            )

        try:
            data = await asyncio.to_thread(self._result_fetcher.fetch_bytes, result_uri)
        except FetchError as e:
            e.job_name = job_name
            raise
        try:
            return parse_result(job_name, data)
        except ParseError:
            logger.exception(
                "Transcription result is not valid JSON",
                extra={"job_name": job_name, "size": len(data)},
            )
            raise
