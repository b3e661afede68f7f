"""Abstract interface for downloading transcription results."""

from abc import ABC, abstractmethod


class ResultFetcher(ABC):
    """Abstract base class for result download backends."""

    @abstractmethod
    def fetch_bytes(self, uri: str) -> bytes:
        """
        Downloads the document at the given URI.

        Raises:
            FetchError: If the download fails.
        """
        pass
