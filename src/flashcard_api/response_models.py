"""Request and response models for the flashcard API."""

from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CardInput(CamelModel):
    """A card as sent by the client."""

    word: str = ""
    image: str = ""


class CardSetInput(CamelModel):
    """A card set as sent by the client; ids are assigned by the server."""

    name: str = ""
    cover_image: str = ""
    cards: List[CardInput] = Field(default_factory=list)


class Card(CardInput):
    """A stored card."""

    id: UUID


class CardSetResponse(CamelModel):
    """A stored card set with all of its cards."""

    id: UUID
    name: str
    cover_image: str
    cards: List[Card]


class ErrorResponse(CamelModel):
    """Error payload returned for every failed request."""

    message: str
    alt_messages: List[str] = Field(default_factory=list)


class ObjectKeyResponse(BaseModel):
    """Key of an object stored by the upload endpoint."""

    key: str


class ReadBody(BaseModel):
    """Text to convert to speech."""

    text: str = Field(min_length=1)
