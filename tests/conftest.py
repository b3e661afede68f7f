import os

# Keep the tracer quiet when the app module is imported.
os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("DD_INSTRUMENTATION_TELEMETRY_ENABLED", "false")
os.environ.setdefault("DD_REMOTE_CONFIGURATION_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fakes import (
    TRANSCRIPT_PAYLOAD,
    FakeImageLabeler,
    FakeResultFetcher,
    FakeSpeechSynthesizer,
    FakeStorage,
    FakeTranscriptionJobService,
)
from flashcard_api.config import (
    AppConfig,
    AWSConfig,
    DatabaseConfig,
    SpeechConfig,
    StorageConfig,
    TranscribeConfig,
    VisionConfig,
)
from flashcard_api.dependencies import (
    get_config,
    get_db_session,
    get_image_labeler,
    get_result_fetcher,
    get_speech_synthesizer,
    get_storage,
    get_transcription_service,
)
from flashcard_api.domain import JobStatus
from flashcard_api.main import app


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(
            host="localhost", port="5432", user="", password="", database="test"
        ),
        storage=StorageConfig(
            endpoint="localhost:9000",
            access_key="",
            secret_key="",
            bucket_name="flashcards",
            region="us-east-1",
            secure=False,
            max_upload_bytes=1024,
        ),
        aws=AWSConfig(region="us-east-1"),
        transcribe=TranscribeConfig(max_wait_seconds=5, poll_interval_seconds=0),
        speech=SpeechConfig(),
        vision=VisionConfig(max_results=10),
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def job_service() -> FakeTranscriptionJobService:
    return FakeTranscriptionJobService(
        script=[JobStatus.IN_PROGRESS, JobStatus.IN_PROGRESS, JobStatus.COMPLETED]
    )


@pytest.fixture
def result_fetcher() -> FakeResultFetcher:
    return FakeResultFetcher(TRANSCRIPT_PAYLOAD)


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def synthesizer() -> FakeSpeechSynthesizer:
    return FakeSpeechSynthesizer()


@pytest.fixture
def labeler() -> FakeImageLabeler:
    return FakeImageLabeler(
        labels=[
            {"mid": "/m/01yrx", "description": "Cat", "score": 0.97},
            {"mid": "/m/0jbk", "description": "Animal", "score": 0.91},
        ]
    )


@pytest.fixture
def client(
    app_config, db_session, job_service, result_fetcher, storage, synthesizer, labeler
):
    def _db_session():
        yield db_session

    app.dependency_overrides[get_config] = lambda: app_config
    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_transcription_service] = lambda: job_service
    app.dependency_overrides[get_result_fetcher] = lambda: result_fetcher
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_speech_synthesizer] = lambda: synthesizer
    app.dependency_overrides[get_image_labeler] = lambda: labeler
    yield TestClient(app)
    app.dependency_overrides.clear()
