"""Abstract interface for text-to-speech operations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class SpeechSynthesizer(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    def synthesize(self, text: str) -> Iterator[bytes]:
        """
        Converts text to mp3 audio.

        The service call happens before this method returns; only reading
        the audio is deferred to the returned iterator.

        Raises:
            SpeechSynthesisError: If the service call fails.
        """
        pass
