"""HTTP implementation of the ResultFetcher interface."""

import httpx

from flashcard_api.exceptions import FetchError
from flashcard_api.logging import setup_logging

from .interfaces import ResultFetcher

logger = setup_logging()


class HttpResultFetcher(ResultFetcher):
    """Downloads transcription results with a plain HTTP GET."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def fetch_bytes(self, uri: str) -> bytes:
        try:
            response = self._client.get(uri)
            response.raise_for_status()
        except httpx.HTTPError as e:
            # The URI is presigned, keep the query string out of the logs.
            logger.exception(
                "Transcription result download failed",
                extra={"uri": uri.split("?", 1)[0]},
            )
            raise FetchError(uri, e) from e

        logger.info(
            "Transcription result downloaded",
            extra={"size": len(response.content)},
        )
        return response.content
