"""Immutable preview models for future subscription orders.

Nothing in here maps to a table: previews are built on demand and discarded.
Every model is frozen, so assigning to a field raises.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AddressPreview(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    firstname: str | None = None
    lastname: str | None = None
    address1: str
    address2: str | None = None
    city: str
    zipcode: str | None = None
    state_name: str | None = None
    country_iso: str
    phone: str | None = None


class OrderPreview(BaseModel):
    """Placeholder order a future subscription order would resemble."""

    model_config = ConfigDict(frozen=True)

    number: str | None = None
    user_id: UUID | None = None
    email: str | None = None
    currency: str
    state: str
    ship_address: AddressPreview | None = None
    bill_address: AddressPreview | None = None


class LineItemPreview(BaseModel):
    """Placeholder order line for calculating future subscription orders."""

    model_config = ConfigDict(frozen=True)

    subscribable_id: UUID
    quantity: int
    price_cents: int | None
    currency: str
    amount_cents: int | None
    interval_length: int | None = None
    interval_units: str | None = None
    order: OrderPreview | None = None
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors
