"""Random bid pricing.

Stands in for a real pricing engine: every call returns a fresh bid id and a
price drawn uniformly from [BASE_BID_PRICE, BASE_BID_PRICE + 1).
"""

import math
import random
import uuid
from typing import Callable
from uuid import UUID

from src.domain.entities import BASE_BID_PRICE, BidResult


class RandomBidService:
    """IAddService implementation backed by an owned random source.

    Pass a seeded ``random.Random`` for reproducible prices and a custom
    ``id_factory`` for reproducible bid ids.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        id_factory: Callable[[], UUID] = uuid.uuid4,
        base_price: float = BASE_BID_PRICE,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._id_factory = id_factory
        self._base_price = base_price
        self._max_price = math.nextafter(base_price + 1, base_price)

    def add(self, placement_id: UUID) -> BidResult:
        # placement_id is accepted for the contract but does not affect pricing
        return BidResult(
            bid_id=self._id_factory(),
            # the float sum rounds up to base + 1 for draws just below 1.0
            bid_price=min(self._base_price + self._rng.random(), self._max_price),
        )


def create_bid_service(seed: int | None = None) -> RandomBidService:
    """Factory function to create a bid service, optionally seeded."""
    return RandomBidService(rng=random.Random(seed))
