"""Passthrough endpoints for image labeling, file upload and text-to-speech."""

import secrets
from typing import Annotated, Any

from fastapi import APIRouter, Depends, UploadFile
from fastapi.responses import StreamingResponse

from flashcard_api.dependencies import (
    ConfigDep,
    get_image_labeler,
    get_speech_synthesizer,
    get_storage,
)
from flashcard_api.exceptions import (
    ApiError,
    ImageLabelingError,
    SpeechSynthesisError,
    StorageUploadError,
)
from flashcard_api.infrastructure.interfaces import (
    ImageLabeler,
    SpeechSynthesizer,
    StorageClient,
)
from flashcard_api.logging import setup_logging
from flashcard_api.response_models import ObjectKeyResponse, ReadBody

logger = setup_logging()

router = APIRouter(tags=["media"])

StorageDep = Annotated[StorageClient, Depends(get_storage)]
LabelerDep = Annotated[ImageLabeler, Depends(get_image_labeler)]
SynthesizerDep = Annotated[SpeechSynthesizer, Depends(get_speech_synthesizer)]

OBJECT_KEY_BYTES = 16


@router.post("/label")
def label_image(
    image: UploadFile, labeler: LabelerDep, config: ConfigDep
) -> list[dict[str, Any]]:
    """Returns the labels the vision service detects in the uploaded image."""
    image_data = image.file.read()
    logger.info(
        "Received label request",
        extra={"file_name": image.filename, "size": len(image_data)},
    )
    try:
        return labeler.detect_labels(image_data, config.vision.max_results)
    except ImageLabelingError as e:
        raise ApiError(502, str(e))


@router.post("/upload", response_model=ObjectKeyResponse)
def upload_file(
    file: UploadFile, storage: StorageDep, config: ConfigDep
) -> ObjectKeyResponse:
    """Stores the uploaded file under a random key and returns the key."""
    size = file.size if file.size is not None else len(file.file.read())
    if size > config.storage.max_upload_bytes:
        raise ApiError(
            413,
            "File is too large",
            f"the limit is {config.storage.max_upload_bytes} bytes",
        )
    file.file.seek(0)

    key = secrets.token_hex(OBJECT_KEY_BYTES)
    logger.info(
        "Received upload request",
        extra={"file_name": file.filename, "object_name": key, "size": size},
    )

    try:
        storage.upload_file(
            object_name=key,
            data=file.file,
            size=size,
            content_type=file.content_type or "application/octet-stream",
        )
    except StorageUploadError as e:
        raise ApiError(500, str(e))

    return ObjectKeyResponse(key=key)


@router.post("/read")
def read_text(body: ReadBody, synthesizer: SynthesizerDep) -> StreamingResponse:
    """Streams the synthesized speech of the given text as mp3 audio."""
    try:
        audio = synthesizer.synthesize(body.text)
    except SpeechSynthesisError as e:
        raise ApiError(502, str(e))
    return StreamingResponse(audio, media_type="audio/mp3")
