"""
Pydantic models for the combined product/remote item lookup.

These models are built fresh per request and never persisted.
"""

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

COMBINED_MESSAGE = "This is an example of async/await that keeps the server responsive."


class ProductRecord(BaseModel):
    """Product returned by the simulated storage lookup."""

    id: int
    name: str
    price: Decimal

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class RemoteItem(BaseModel):
    """Todo item deserialized from the external JSON API."""

    # Wire name is userId; ownerId is accepted when built in code
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    owner_id: int = Field(
        ...,
        validation_alias=AliasChoices("userId", "ownerId", "owner_id"),
        serialization_alias="userId",
    )
    title: str
    completed: bool


class CombinedResult(BaseModel):
    """Joined outcome of the product lookup and the remote fetch."""

    product: ProductRecord
    remote_item: RemoteItem
    message: str = COMBINED_MESSAGE
