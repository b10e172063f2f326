"""Protocol interfaces for bid service components."""

from typing import Protocol, runtime_checkable
from uuid import UUID

from .entities import BidResult


@runtime_checkable
class IAddService(Protocol):
    """Interface for anything that can price a bid for an ad placement.

    Implementations can include the random stub, a real auction-pricing engine,
    or decorators wrapping another IAddService.
    """

    def add(self, placement_id: UUID) -> BidResult:
        """Produce a new bid for the placement.

        Raises AddServiceError when no bid can be produced.
        """
        ...
