"""Bid service implementations and decorators."""

from .logging_middleware import LoggingAddService
from .random_bidder import RandomBidService, create_bid_service

__all__ = [
    "LoggingAddService",
    "RandomBidService",
    "create_bid_service",
]
