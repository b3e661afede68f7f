from .card_sets import router as card_sets_router
from .media import router as media_router
from .transcribe import router as transcribe_router

__all__ = ["card_sets_router", "media_router", "transcribe_router"]
