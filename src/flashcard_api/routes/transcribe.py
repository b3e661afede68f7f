"""Speech-to-text endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request

from flashcard_api.dependencies import ConfigDep, get_orchestrator
from flashcard_api.domain import TranscriptionRequest
from flashcard_api.exceptions import (
    ApiError,
    JobFailedError,
    TranscriptionCancelledError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from flashcard_api.handlers import TranscriptionOrchestrator
from flashcard_api.logging import setup_logging

logger = setup_logging()

router = APIRouter(prefix="/transcribe", tags=["transcribe"])

OrchestratorDep = Annotated[TranscriptionOrchestrator, Depends(get_orchestrator)]

CLIENT_CLOSED_REQUEST = 499


def _to_api_error(error: TranscriptionError) -> ApiError:
    if isinstance(error, TranscriptionTimeoutError):
        return ApiError(
            504,
            str(error),
            "the transcription job is still running, check it again later",
        )
    if isinstance(error, TranscriptionCancelledError):
        return ApiError(CLIENT_CLOSED_REQUEST, str(error))
    if isinstance(error, JobFailedError) and error.reason:
        return ApiError(502, str(error), error.reason)
    return ApiError(502, str(error))


@router.post("", response_model=None)
async def transcribe(
    body: TranscriptionRequest,
    request: Request,
    orchestrator: OrchestratorDep,
    config: ConfigDep,
) -> dict[str, Any]:
    """
    Transcribes an uploaded audio file.

    The key of the stored audio file is reused as the job name. The request
    waits for the job for at most the configured number of seconds and
    returns the transcription result document unchanged.
    """
    logger.info(
        "Received transcription request",
        extra={"key": body.key, "media_format": body.media_format.value},
    )
    try:
        return await orchestrator.run(
            body,
            config.transcribe.max_wait_seconds,
            is_cancelled=request.is_disconnected,
        )
    except TranscriptionError as e:
        raise _to_api_error(e)


@router.get("/{key}", response_model=None)
async def check_transcription(
    key: str,
    request: Request,
    orchestrator: OrchestratorDep,
    config: ConfigDep,
    max_wait_seconds: Annotated[int, Query(alias="maxWaitSeconds", ge=1)] = 1,
) -> dict[str, Any]:
    """Waits for a previously submitted job without submitting it again."""
    if max_wait_seconds > config.transcribe.max_wait_seconds:
        raise ApiError(
            400,
            "maxWaitSeconds is too large",
            f"the limit is {config.transcribe.max_wait_seconds}",
        )
    try:
        return await orchestrator.await_result(
            key, max_wait_seconds, is_cancelled=request.is_disconnected
        )
    except TranscriptionError as e:
        raise _to_api_error(e)
