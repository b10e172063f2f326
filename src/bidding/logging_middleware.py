import logging
import time
from uuid import UUID

from src.domain.entities import BidResult
from src.domain.protocols import IAddService

logger = logging.getLogger(__name__)


class LoggingAddService:
    """Wraps an IAddService and logs one ``addrequest`` event per call.

    The wrapped call is never retried, altered or suppressed: results are
    returned as-is and exceptions propagate after being logged.
    """

    def __init__(self, next_service: IAddService) -> None:
        self._next = next_service

    def add(self, placement_id: UUID) -> BidResult:
        start_time = time.perf_counter()
        result: BidResult | None = None
        error: Exception | None = None
        try:
            result = self._next.add(placement_id)
            return result
        except Exception as e:
            error = e
            raise
        finally:
            took_ms = (time.perf_counter() - start_time) * 1000
            bid_id = result.bid_id if result else None
            bid_price = result.bid_price if result else None
            logger.info(
                "addrequest id=%s bidID=%s bidPrice=%s err=%s took=%.3fms",
                placement_id,
                bid_id,
                bid_price,
                error,
                took_ms,
                extra={
                    "placement_id": placement_id,
                    "bid_id": bid_id,
                    "bid_price": bid_price,
                    "error": error,
                    "took_ms": took_ms,
                },
            )
