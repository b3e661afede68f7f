"""Card set CRUD endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from flashcard_api.dependencies import get_card_set_repository
from flashcard_api.exceptions import (
    ApiError,
    CardSetNotFoundError,
    CardSetPersistenceError,
)
from flashcard_api.logging import setup_logging
from flashcard_api.repositories import CardSetRepository
from flashcard_api.response_models import CardSetInput, CardSetResponse

logger = setup_logging()

router = APIRouter(prefix="/card-sets", tags=["card-sets"])

RepositoryDep = Annotated[CardSetRepository, Depends(get_card_set_repository)]

NOT_FOUND_MESSAGE = "the card set was not found"


@router.post("", response_model=CardSetResponse)
def create_card_set(payload: CardSetInput, repo: RepositoryDep):
    """Stores a new card set; the set and its cards get generated ids."""
    try:
        return repo.create(payload)
    except CardSetPersistenceError as e:
        raise ApiError(500, str(e))


@router.get("", response_model=List[CardSetResponse])
def list_card_sets(repo: RepositoryDep):
    """Returns all card sets."""
    try:
        return repo.list_all()
    except CardSetPersistenceError as e:
        raise ApiError(500, str(e))


@router.get("/{card_set_id}", response_model=CardSetResponse)
def get_card_set(card_set_id: UUID, repo: RepositoryDep):
    try:
        return repo.get_by_id(card_set_id)
    except CardSetNotFoundError as e:
        raise ApiError(404, str(e), NOT_FOUND_MESSAGE)
    except CardSetPersistenceError as e:
        raise ApiError(500, str(e))


@router.put("/{card_set_id}", response_model=CardSetResponse)
def replace_card_set(card_set_id: UUID, payload: CardSetInput, repo: RepositoryDep):
    """Replaces a card set; every card gets a new id."""
    try:
        return repo.replace(card_set_id, payload)
    except CardSetNotFoundError as e:
        raise ApiError(404, str(e), NOT_FOUND_MESSAGE)
    except CardSetPersistenceError as e:
        raise ApiError(500, str(e))


@router.delete("/{card_set_id}")
def delete_card_set(card_set_id: UUID, repo: RepositoryDep) -> Response:
    try:
        repo.delete(card_set_id)
    except CardSetNotFoundError as e:
        raise ApiError(404, str(e), NOT_FOUND_MESSAGE)
    except CardSetPersistenceError as e:
        raise ApiError(500, str(e))
    return Response(status_code=200)
