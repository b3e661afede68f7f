"""Tests for the shared service handle providers."""

import pytest

from fakes import FakeResultFetcher, FakeTranscriptionJobService
from flashcard_api import dependencies
from flashcard_api.infrastructure import AWSTranscribeJobService


@pytest.fixture
def fresh_providers(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    dependencies.get_config.cache_clear()
    dependencies.get_transcription_service.cache_clear()
    yield
    dependencies.get_config.cache_clear()
    dependencies.get_transcription_service.cache_clear()


def test_transcription_service_is_created_once(fresh_providers):
    first = dependencies.get_transcription_service()
    second = dependencies.get_transcription_service()

    assert isinstance(first, AWSTranscribeJobService)
    assert first is second


def test_orchestrator_uses_configured_bucket(app_config):
    orchestrator = dependencies.get_orchestrator(
        app_config, FakeTranscriptionJobService(), FakeResultFetcher()
    )

    assert orchestrator.media_uri("abc123") == "s3://flashcards/abc123"
