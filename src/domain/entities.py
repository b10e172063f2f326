"""Domain entities for the bid placeholder service."""

from dataclasses import dataclass
from uuid import UUID

BASE_BID_PRICE = 69.69


@dataclass(frozen=True)
class BidResult:
    """Outcome of a single add operation."""
    bid_id: UUID
    bid_price: float


class AddServiceError(Exception):
    """Raised by an add service when no bid can be produced for a placement."""

    def __init__(self, message: str, placement_id: UUID | None = None) -> None:
        super().__init__(message)
        self.placement_id = placement_id
