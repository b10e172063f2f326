"""Data Transfer Objects for the add API."""

from uuid import UUID

from pydantic import BaseModel, Field


class AddRequest(BaseModel):
    """Request payload for the /add endpoint."""

    model_config = {"populate_by_name": True}

    add_placement_id: UUID | None = Field(
        default=None,
        alias="addPlacementID",
        description="Ad placement to bid on",
    )


class AddResponse(BaseModel):
    """Response payload from the /add endpoint."""

    model_config = {"populate_by_name": True}

    add_id: UUID = Field(..., alias="addID")
    bid_price: float = Field(..., alias="bidPrice")
