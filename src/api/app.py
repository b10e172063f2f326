"""FastAPI application for the add service."""

from fastapi import FastAPI

from src.api.config import AppConfig, app_config
from src.api.handlers import AddRequestHandler, make_handler
from src.bidding import LoggingAddService, create_bid_service
from src.domain.protocols import IAddService

ADD_ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(
    service: IAddService | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Build the application, wrapping ``service`` with request logging."""
    config = config or app_config
    if service is None:
        service = create_bid_service(config.random_seed)

    app = FastAPI(
        title="Add Bid API",
        description="Returns a bid id and bid price for an ad placement",
        version="1.0.0",
    )

    handler = AddRequestHandler(
        LoggingAddService(service),
        service_error_status=config.service_error_status,
    )
    app.add_api_route(
        "/add",
        make_handler(handler.handle_add_request),
        methods=ADD_ROUTE_METHODS,
        name="add",
    )
    return app


app = create_app()
