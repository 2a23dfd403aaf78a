"""Like use cases."""

from .get_reactions import (
    GetReactionsRequest,
    GetReactionsResponse,
    GetReactionsUseCase,
)
from .react import LikeItem, ReactRequest, ReactResponse, ReactUseCase

__all__ = [
    "GetReactionsRequest",
    "GetReactionsResponse",
    "GetReactionsUseCase",
    "LikeItem",
    "ReactRequest",
    "ReactResponse",
    "ReactUseCase",
]
