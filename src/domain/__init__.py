"""Domain layer: entities and protocols."""

from .entities import (
    BASE_BID_PRICE,
    AddServiceError,
    BidResult,
)

from .protocols import IAddService

__all__ = [
    "BASE_BID_PRICE",
    "AddServiceError",
    "BidResult",
    "IAddService",
]
