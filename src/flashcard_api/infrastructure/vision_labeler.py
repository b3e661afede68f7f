"""Google Cloud Vision implementation of the ImageLabeler interface."""

from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud import vision

from flashcard_api.exceptions import ImageLabelingError
from flashcard_api.logging import setup_logging

from .interfaces import ImageLabeler

logger = setup_logging()


class GoogleVisionLabeler(ImageLabeler):
    """Labels images with the Cloud Vision label detection feature."""

    def __init__(self, client: vision.ImageAnnotatorClient):
        self._client = client

    def detect_labels(self, image_data: bytes, max_results: int) -> list[dict[str, Any]]:
        try:
            response = self._client.label_detection(
                image=vision.Image(content=image_data),
                max_results=max_results,
            )
        except GoogleAPIError as e:
            logger.exception("Cloud Vision label detection failed")
            raise ImageLabelingError("Label detection request failed", e) from e

        if response.error.message:
            logger.error(
                "Cloud Vision returned an error",
                extra={"error": response.error.message},
            )
            raise ImageLabelingError(response.error.message)

        labels = [
            vision.EntityAnnotation.to_dict(label) for label in response.label_annotations
        ]
        logger.info("Image labeled", extra={"label_count": len(labels)})
        return labels
