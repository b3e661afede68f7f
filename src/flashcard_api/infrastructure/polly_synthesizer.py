"""AWS Polly implementation of the SpeechSynthesizer interface."""

from collections.abc import Iterator

from botocore.exceptions import BotoCoreError, ClientError

from flashcard_api.exceptions import SpeechSynthesisError
from flashcard_api.logging import setup_logging

from .interfaces import SpeechSynthesizer

logger = setup_logging()

CHUNK_SIZE = 4096


class PollySpeechSynthesizer(SpeechSynthesizer):
    """Synthesizes speech with AWS Polly."""

    def __init__(self, client, voice_id: str = "Joanna", output_format: str = "mp3"):
        """
        Args:
            client: A boto3 "polly" client.
            voice_id: Polly voice used for every request.
            output_format: Audio encoding requested from Polly.
        """
        self._client = client
        self._voice_id = voice_id
        self._output_format = output_format

    def synthesize(self, text: str) -> Iterator[bytes]:
        try:
            response = self._client.synthesize_speech(
                Text=text,
                OutputFormat=self._output_format,
                VoiceId=self._voice_id,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "Polly speech synthesis failed",
                extra={"voice_id": self._voice_id, "text_length": len(text)},
            )
            raise SpeechSynthesisError(self._voice_id, e) from e

        logger.info(
            "Speech synthesized",
            extra={"voice_id": self._voice_id, "text_length": len(text)},
        )
        return self._stream(response["AudioStream"])

    def _stream(self, audio_stream) -> Iterator[bytes]:
        try:
            yield from audio_stream.iter_chunks(chunk_size=CHUNK_SIZE)
        finally:
            audio_stream.close()
