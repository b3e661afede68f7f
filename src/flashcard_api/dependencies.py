"""FastAPI dependency injection configuration.

Vendor clients are created on first use and then shared by every request.
Tests swap any provider through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated, Generator

import boto3
import httpx
from fastapi import Depends
from google.cloud import vision
from minio import Minio
from sqlalchemy.engine import Engine
from sqlmodel import Session as DBSession
from sqlmodel import SQLModel, create_engine

from flashcard_api.config import AppConfig, load_config
from flashcard_api.handlers import TranscriptionOrchestrator
from flashcard_api.infrastructure import (
    AWSTranscribeJobService,
    GoogleVisionLabeler,
    HttpResultFetcher,
    MinioStorage,
    PollySpeechSynthesizer,
)
from flashcard_api.infrastructure.interfaces import (
    ImageLabeler,
    ResultFetcher,
    SpeechSynthesizer,
    StorageClient,
    TranscriptionJobService,
)
from flashcard_api.logging import setup_logging
from flashcard_api.repositories import CardSetRepository

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration."""
    return load_config()


@lru_cache
def _get_engine() -> Engine:
    engine = create_engine(get_config().database.url, pool_pre_ping=True)
    SQLModel.metadata.create_all(engine)
    logger.info("Card set store initialized")
    return engine


@lru_cache
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    config = get_config().storage
    client = Minio(
        endpoint=config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        region=config.region,
        secure=config.secure,
    )
    storage = MinioStorage(client, config.bucket_name)
    storage.ensure_bucket_exists()
    return storage


@lru_cache
def get_transcription_service() -> TranscriptionJobService:
    """Returns the configured transcription job service."""
    client = boto3.client("transcribe", region_name=get_config().aws.region)
    return AWSTranscribeJobService(client)


@lru_cache
def get_result_fetcher() -> ResultFetcher:
    """Returns the configured transcription result fetcher."""
    timeout = get_config().transcribe.result_fetch_timeout_seconds
    return HttpResultFetcher(httpx.Client(timeout=timeout, follow_redirects=True))


@lru_cache
def get_speech_synthesizer() -> SpeechSynthesizer:
    """Returns the configured text-to-speech service."""
    config = get_config()
    client = boto3.client("polly", region_name=config.aws.region)
    return PollySpeechSynthesizer(
        client,
        voice_id=config.speech.voice_id,
        output_format=config.speech.output_format,
    )


@lru_cache
def get_image_labeler() -> ImageLabeler:
    """Returns the configured image labeler."""
    return GoogleVisionLabeler(vision.ImageAnnotatorClient())


ConfigDep = Annotated[AppConfig, Depends(get_config)]
TranscriptionServiceDep = Annotated[
    TranscriptionJobService, Depends(get_transcription_service)
]
ResultFetcherDep = Annotated[ResultFetcher, Depends(get_result_fetcher)]


def get_orchestrator(
    config: ConfigDep,
    job_service: TranscriptionServiceDep,
    result_fetcher: ResultFetcherDep,
) -> TranscriptionOrchestrator:
    """Returns a transcription orchestrator bound to the shared service handles."""
    return TranscriptionOrchestrator(
        job_service=job_service,
        result_fetcher=result_fetcher,
        bucket_name=config.storage.bucket_name,
        language_code=config.transcribe.language_code,
        poll_interval_seconds=config.transcribe.poll_interval_seconds,
        media_uri_scheme=config.transcribe.media_uri_scheme,
    )


def get_db_session() -> Generator[DBSession, None, None]:
    """Yields a database session, ensuring proper cleanup."""
    with DBSession(_get_engine()) as session:
        yield session


def get_card_set_repository(
    db_session: Annotated[DBSession, Depends(get_db_session)],
) -> CardSetRepository:
    """Creates a CardSetRepository with the provided database session."""
    return CardSetRepository(db_session)
