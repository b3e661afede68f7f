from .card_set_repository import CardSetRepository

__all__ = ["CardSetRepository"]
