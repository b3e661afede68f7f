"""Abstract interface for image labeling operations."""

from abc import ABC, abstractmethod
from typing import Any


class ImageLabeler(ABC):
    """Abstract base class for image labeling backends."""

    @abstractmethod
    def detect_labels(self, image_data: bytes, max_results: int) -> list[dict[str, Any]]:
        """
        Detects labels describing the content of an image.

        Args:
            image_data: Raw image file bytes.
            max_results: Maximum number of labels to return.

        Returns:
            Label annotations as returned by the service.

        Raises:
            ImageLabelingError: If the service call fails.
        """
        pass
