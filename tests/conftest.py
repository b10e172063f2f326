import random
import uuid
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.config import AppConfig
from src.bidding import RandomBidService
from src.domain.entities import AddServiceError, BidResult


class RecordingAddService:
    """Returns fixed-price bids and remembers every placement id it saw."""

    def __init__(self, bid_price: float = 70.0) -> None:
        self.bid_price = bid_price
        self.placement_ids: list[UUID] = []

    def add(self, placement_id: UUID) -> BidResult:
        self.placement_ids.append(placement_id)
        return BidResult(bid_id=uuid.uuid4(), bid_price=self.bid_price)


class FailingAddService:
    """Always raises the configured error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def add(self, placement_id: UUID) -> BidResult:
        self.calls += 1
        raise self.error


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def config():
    return AppConfig(random_seed=1234)


@pytest.fixture
def client(config):
    return TestClient(create_app(config=config))


@pytest.fixture
def recording_service():
    return RecordingAddService()


@pytest.fixture
def seeded_service():
    return RandomBidService(rng=random.Random(42))


@pytest.fixture
def service_error():
    return AddServiceError("inventory exhausted")
