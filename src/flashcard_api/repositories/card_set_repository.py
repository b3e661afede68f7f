"""Repository for card set persistence."""

from typing import List
from uuid import UUID, uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session as DBSession
from sqlmodel import select

from flashcard_api.db_models import CardSetDocument
from flashcard_api.exceptions import CardSetNotFoundError, CardSetPersistenceError
from flashcard_api.logging import setup_logging
from flashcard_api.response_models import CardSetInput, CardSetResponse

logger = setup_logging()


class CardSetRepository:
    """
    Handles all database operations for card sets.

    A card set is stored as one document: the cards live in a JSON column
    next to the set they belong to. Every write gives each card a fresh id.
    """

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def create(self, payload: CardSetInput) -> CardSetResponse:
        """Stores a new card set under a generated id."""
        document = CardSetDocument(
            id=uuid4(),
            name=payload.name,
            cover_image=payload.cover_image,
            cards=self._new_cards(payload),
        )
        self._save(document, "insert")
        logger.info("Card set created", extra={"card_set_id": str(document.id)})
        return self._to_response(document)

    def list_all(self) -> List[CardSetResponse]:
        """Returns every stored card set, possibly none."""
        try:
            documents = self._db.exec(select(CardSetDocument)).all()
        except SQLAlchemyError as e:
            logger.exception("Card set listing failed")
            raise CardSetPersistenceError("listing", e) from e
        return [self._to_response(document) for document in documents]

    def get_by_id(self, card_set_id: UUID) -> CardSetResponse:
        """
        Retrieves a single card set.

        Raises:
            CardSetNotFoundError: If the card set does not exist.
        """
        return self._to_response(self._get_document(card_set_id))

    def replace(self, card_set_id: UUID, payload: CardSetInput) -> CardSetResponse:
        """
        Replaces the content of an existing card set, keeping its id.

        Raises:
            CardSetNotFoundError: If the card set does not exist.
        """
        document = self._get_document(card_set_id)
        document.name = payload.name
        document.cover_image = payload.cover_image
        document.cards = self._new_cards(payload)
        self._save(document, "replace")
        logger.info("Card set replaced", extra={"card_set_id": str(card_set_id)})
        return self._to_response(document)

    def delete(self, card_set_id: UUID) -> None:
        """
        Deletes a card set.

        Raises:
            CardSetNotFoundError: If the card set does not exist.
        """
        document = self._get_document(card_set_id)
        try:
            self._db.delete(document)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(
                "Card set delete failed", extra={"card_set_id": str(card_set_id)}
            )
            raise CardSetPersistenceError("delete", e) from e
        logger.info("Card set deleted", extra={"card_set_id": str(card_set_id)})

    def _get_document(self, card_set_id: UUID) -> CardSetDocument:
        try:
            document = self._db.get(CardSetDocument, card_set_id)
        except SQLAlchemyError as e:
            logger.exception(
                "Card set lookup failed", extra={"card_set_id": str(card_set_id)}
            )
            raise CardSetPersistenceError("lookup", e) from e
        if document is None:
            raise CardSetNotFoundError(card_set_id)
        return document

    def _save(self, document: CardSetDocument, operation: str) -> None:
        try:
            self._db.add(document)
            self._db.commit()
            self._db.refresh(document)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(
                f"Card set {operation} failed",
                extra={"card_set_id": str(document.id)},
            )
            raise CardSetPersistenceError(operation, e) from e

    def _new_cards(self, payload: CardSetInput) -> list[dict]:
        return [
            {"id": str(uuid4()), "word": card.word, "image": card.image}
            for card in payload.cards
        ]

    def _to_response(self, document: CardSetDocument) -> CardSetResponse:
        return CardSetResponse(
            id=document.id,
            name=document.name,
            cover_image=document.cover_image,
            cards=document.cards,
        )
