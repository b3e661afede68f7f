"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, computed_field


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable card set store connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full PostgreSQL connection URL."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration."""

    endpoint: str
    access_key: str
    secret_key: str
    bucket_name: str
    region: str
    secure: bool = True
    max_upload_bytes: int = 10 * 1024 * 1024


class AWSConfig(BaseModel, frozen=True):
    """AWS client configuration shared by Transcribe and Polly."""

    region: str = "ap-southeast-1"


class TranscribeConfig(BaseModel, frozen=True):
    """Speech-to-text job configuration."""

    language_code: str = "en-US"
    max_wait_seconds: int = Field(default=30, ge=1)
    poll_interval_seconds: float = Field(default=1.0, ge=0)
    media_uri_scheme: str = "s3"
    result_fetch_timeout_seconds: float = 10.0


class SpeechConfig(BaseModel, frozen=True):
    """Text-to-speech configuration."""

    voice_id: str = "Joanna"
    output_format: str = "mp3"


class VisionConfig(BaseModel, frozen=True):
    """Image labeling configuration."""

    max_results: int = 10


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    storage: StorageConfig
    aws: AWSConfig
    transcribe: TranscribeConfig
    speech: SpeechConfig
    vision: VisionConfig


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    region = os.getenv("AWS_REGION", "ap-southeast-1")
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "flashcards"),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("STORAGE_ENDPOINT", f"s3.{region}.amazonaws.com"),
            access_key=os.getenv("STORAGE_ACCESS_KEY", ""),
            secret_key=os.getenv("STORAGE_SECRET_KEY", ""),
            bucket_name=os.getenv("BUCKET_NAME", "flashcards"),
            region=region,
            secure=_env_flag("STORAGE_SECURE", "true"),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        ),
        aws=AWSConfig(region=region),
        transcribe=TranscribeConfig(
            language_code=os.getenv("TRANSCRIBE_LANGUAGE_CODE", "en-US"),
            max_wait_seconds=int(os.getenv("TRANSCRIBE_MAX_WAIT_SECONDS", "30")),
            poll_interval_seconds=float(
                os.getenv("TRANSCRIBE_POLL_INTERVAL_SECONDS", "1")
            ),
            media_uri_scheme=os.getenv("TRANSCRIBE_MEDIA_URI_SCHEME", "s3"),
            result_fetch_timeout_seconds=float(
                os.getenv("RESULT_FETCH_TIMEOUT_SECONDS", "10")
            ),
        ),
        speech=SpeechConfig(voice_id=os.getenv("POLLY_VOICE_ID", "Joanna")),
        vision=VisionConfig(max_results=int(os.getenv("LABEL_MAX_RESULTS", "10"))),
    )
