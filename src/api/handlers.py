"""Request handling for the add API.

``AddRequestHandler`` turns an HTTP request into a call on an IAddService and
the result back into JSON. ``make_handler`` adapts such handler coroutines into
route endpoints so that nothing they raise escapes to the server.
"""

import logging
import uuid
from typing import Awaitable, Callable
from uuid import UUID

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from src.api.dtos import AddRequest, AddResponse
from src.domain.entities import AddServiceError
from src.domain.protocols import IAddService

logger = logging.getLogger(__name__)

APIFunc = Callable[[Request], Awaitable[Response]]


def write_json(status_code: int, payload: BaseModel | None) -> Response:
    """Build a JSON response, or an empty one when there is no payload."""
    if payload is None:
        return Response(status_code=status_code, media_type="application/json")
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", by_alias=True),
    )


def make_handler(handler: APIFunc) -> APIFunc:
    """Wrap a handler so errors are logged with the request path."""

    async def endpoint(request: Request) -> Response:
        try:
            return await handler(request)
        except Exception as e:
            logger.error(
                "API error path=%s err=%s", request.url.path, e, exc_info=True
            )
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return endpoint


class AddRequestHandler:
    """Handles HTTP requests for the add service."""

    def __init__(
        self,
        service: IAddService,
        service_error_status: int = status.HTTP_204_NO_CONTENT,
    ) -> None:
        self._service = service
        self._service_error_status = service_error_status

    async def _placement_id_from(self, request: Request) -> UUID:
        body = await request.body()
        try:
            placement_id = AddRequest.model_validate_json(body).add_placement_id
        except ValidationError as e:
            logger.debug("ignoring undecodable add request body: %s", e)
            placement_id = None

        if placement_id is None:
            placement_id = uuid.uuid4()
        return placement_id

    async def handle_add_request(self, request: Request) -> Response:
        placement_id = await self._placement_id_from(request)

        try:
            result = self._service.add(placement_id)
        except AddServiceError as e:
            logger.error(
                "add service returned an error placement_id=%s err=%s",
                placement_id,
                e,
            )
            return write_json(self._service_error_status, None)

        resp = AddResponse(add_id=result.bid_id, bid_price=result.bid_price)
        return write_json(status.HTTP_200_OK, resp)
