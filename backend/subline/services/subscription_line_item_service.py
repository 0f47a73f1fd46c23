"""Service for subscription line items: validation, lifecycle and previews."""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from subline.core.config import settings
from subline.core.errors import NotFoundError, ValidationError
from subline.interval import Interval, resolve_interval
from subline.models.order import Order, OrderState
from subline.models.subscription import Subscription
from subline.models.subscription_event import SubscriptionEventType
from subline.models.subscription_line_item import SubscriptionLineItem
from subline.repositories.catalog_repository import AddressRepository, UserRepository
from subline.repositories.order_repository import OrderRepository
from subline.repositories.subscription_line_item_repository import (
    SubscriptionLineItemRepository,
)
from subline.repositories.subscription_repository import SubscriptionRepository
from subline.schemas.preview import AddressPreview, LineItemPreview, OrderPreview
from subline.schemas.subscription_line_item import (
    SubscriptionLineItemCreate,
    SubscriptionLineItemFromOrderLine,
    SubscriptionLineItemResponse,
    SubscriptionLineItemUpdate,
)
from subline.services.line_item_builder import LineItemBuilder
from subline.services.subscription_event_service import SubscriptionEventService

logger = logging.getLogger(__name__)

# Left out of event details: the preview is derived data carrying addresses,
# and the interval fields are governed by the subscription.
EVENT_PAYLOAD_EXCLUDED_FIELDS = frozenset(
    {
        "dummy_line_item",
        "interval_units",
        "interval_length",
        "end_date",
        "source_line_item_id",
    }
)

_VALIDATED_FIELDS = ("subscribable_id", "quantity", "interval_length", "interval_units")


def to_event_payload(representation: Mapping[str, Any]) -> dict[str, Any]:
    """Project a line item representation onto the details of an event."""
    return {
        key: value
        for key, value in representation.items()
        if key not in EVENT_PAYLOAD_EXCLUDED_FIELDS
    }


class SubscriptionLineItemService:
    """Create, update and delete line items, tracking each change on the subscription."""

    def __init__(self, db: Session):
        self.db = db
        self.line_item_repo = SubscriptionLineItemRepository(db)
        self.subscription_repo = SubscriptionRepository(db)
        self.order_repo = OrderRepository(db)
        self.user_repo = UserRepository(db)
        self.address_repo = AddressRepository(db)
        self.event_service = SubscriptionEventService(db)
        self.builder = LineItemBuilder(db)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, values: Mapping[str, Any], subscription: Subscription | None) -> None:
        """Raise ValidationError unless ``values`` describe a valid line item.

        Args:
            values: The line item attributes as they would be saved.
            subscription: The owning subscription, if any. When present its
                interval governs and the line item's own interval is not checked.

        Raises:
            ValidationError: With every failing field and its messages.
        """
        errors: dict[str, list[str]] = {}

        if values.get("subscribable_id") is None:
            errors.setdefault("subscribable_id", []).append("can't be blank")

        quantity = values.get("quantity")
        if quantity is None or quantity <= 0:
            errors.setdefault("quantity", []).append("must be greater than 0")

        if subscription is None:
            own = Interval.from_columns(values.get("interval_length"), values.get("interval_units"))
            if not own.is_positive:
                errors.setdefault("interval_length", []).append("must be greater than 0")

        if errors:
            raise ValidationError(errors)

    def effective_interval(self, line_item: SubscriptionLineItem) -> Interval | None:
        """The interval that governs ``line_item``: its subscription's, else its own."""
        subscription = self._find_subscription(line_item.subscription_id)
        return resolve_interval(
            line_item.interval,
            subscription.interval if subscription is not None else None,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def get_line_item(self, line_item_id: UUID) -> SubscriptionLineItem:
        line_item = self.line_item_repo.get_by_id(line_item_id)
        if line_item is None:
            raise NotFoundError("Subscription line item", line_item_id)
        return line_item

    def list_line_items(
        self,
        subscription_id: UUID | None = None,
        skip: int = 0,
        limit: int = 100,
        order_by: str | None = None,
    ) -> list[SubscriptionLineItem]:
        return self.line_item_repo.get_all(
            subscription_id=subscription_id, skip=skip, limit=limit, order_by=order_by
        )

    def count_line_items(self, subscription_id: UUID | None = None) -> int:
        return self.line_item_repo.count(subscription_id=subscription_id)

    def create_line_item(self, data: SubscriptionLineItemCreate) -> SubscriptionLineItem:
        """Validate and persist a new line item, then record ``line_item_created``.

        Raises:
            NotFoundError: If the subscription or source order line does not exist.
            ValidationError: If the line item is invalid.
        """
        subscription = self._get_subscription(data.subscription_id)
        if (
            data.source_line_item_id is not None
            and self.order_repo.get_line_item_by_id(data.source_line_item_id) is None
        ):
            raise NotFoundError("Order line item", data.source_line_item_id)

        values = data.model_dump()
        values["interval_units"] = data.interval_units.value
        self.validate(values, subscription)

        try:
            line_item = self.line_item_repo.create(values)
            self._track_event(line_item, SubscriptionEventType.LINE_ITEM_CREATED)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create subscription line item")
            raise

        self.db.refresh(line_item)
        logger.info(
            "Created subscription line item %s (subscription %s)",
            line_item.id,
            line_item.subscription_id,
        )
        return line_item

    def create_from_order_line_item(
        self, data: SubscriptionLineItemFromOrderLine
    ) -> SubscriptionLineItem:
        """Create a line item that repeats a regular order line.

        Raises:
            NotFoundError: If the order line does not exist.
        """
        order_line = self.order_repo.get_line_item_by_id(data.order_line_item_id)
        if order_line is None:
            raise NotFoundError("Order line item", data.order_line_item_id)

        return self.create_line_item(
            SubscriptionLineItemCreate(
                subscribable_id=(
                    data.subscribable_id
                    if data.subscribable_id is not None
                    else order_line.subscribable_id
                ),
                quantity=data.quantity if data.quantity is not None else order_line.quantity,
                interval_length=data.interval_length,
                interval_units=data.interval_units,
                installments=data.installments,
                subscription_id=data.subscription_id,
                source_line_item_id=order_line.id,
            )
        )

    def update_line_item(
        self, line_item_id: UUID, data: SubscriptionLineItemUpdate
    ) -> SubscriptionLineItem:
        """Apply changes to a line item, then record ``line_item_updated``."""
        line_item = self.get_line_item(line_item_id)

        changes = data.model_dump(exclude_unset=True)
        if "interval_units" in changes:
            if changes["interval_units"] is not None:
                changes["interval_units"] = changes["interval_units"].value
            else:
                del changes["interval_units"]

        values = {field: getattr(line_item, field) for field in _VALIDATED_FIELDS}
        values.update(changes)
        self.validate(values, self._find_subscription(line_item.subscription_id))

        try:
            self.line_item_repo.update(line_item, changes)
            self._track_event(line_item, SubscriptionEventType.LINE_ITEM_UPDATED)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to update subscription line item %s", line_item_id)
            raise

        self.db.refresh(line_item)
        logger.info("Updated subscription line item %s", line_item_id)
        return line_item

    def delete_line_item(self, line_item_id: UUID) -> None:
        """Delete a line item, then record ``line_item_destroyed``."""
        line_item = self.get_line_item(line_item_id)
        subscription_id = line_item.subscription_id
        details = self.event_payload(line_item)

        try:
            self.line_item_repo.delete(line_item)
            if subscription_id is not None:
                self.event_service.emit_event(
                    subscription_id, SubscriptionEventType.LINE_ITEM_DESTROYED, details
                )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete subscription line item %s", line_item_id)
            raise

        logger.info("Deleted subscription line item %s", line_item_id)

    def _track_event(
        self, line_item: SubscriptionLineItem, event_type: SubscriptionEventType
    ) -> None:
        if line_item.subscription_id is None:
            return
        self.event_service.emit_event(
            line_item.subscription_id, event_type, self.event_payload(line_item)
        )

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def serialize(
        self, line_item: SubscriptionLineItem, include_preview: bool = True
    ) -> SubscriptionLineItemResponse:
        """External representation of a line item, with its preview by default."""
        response = SubscriptionLineItemResponse.model_validate(line_item)
        if include_preview:
            response.dummy_line_item = self.dummy_line_item(line_item)
        return response

    def event_payload(self, line_item: SubscriptionLineItem) -> dict[str, Any]:
        # The preview is excluded from the payload, so it is not built here.
        representation = self.serialize(line_item, include_preview=False)
        return to_event_payload(representation.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Previews
    # ------------------------------------------------------------------

    def dummy_line_item(self, line_item: SubscriptionLineItem) -> LineItemPreview | None:
        """Placeholder order line for calculating future subscription orders.

        Carries the interval that governs the line item, which is the
        subscription's when there is one.

        Returns None when the subscribable can no longer be supplied. The
        result, and the order attached to it, are frozen; nothing is saved.
        """
        lines = self.builder.build([line_item])
        if not lines:
            logger.warning(
                "No preview for subscription line item %s: subscribable %s unavailable",
                line_item.id,
                line_item.subscribable_id,
            )
            return None

        order = self.dummy_order(line_item)
        interval = self.effective_interval(line_item)
        line = lines[0]
        errors = self.builder.validate(line, order)
        return line.model_copy(
            update={
                "order": order,
                "errors": tuple(errors),
                "interval_length": interval.length if interval is not None else None,
                "interval_units": interval.units.value if interval is not None else None,
            }
        )

    def dummy_order(self, line_item: SubscriptionLineItem) -> OrderPreview:
        """Placeholder order for calculating future subscription orders.

        Copies the order the line item was converted from, minus its identity,
        or starts from an empty order. The subscription's addresses, falling
        back to its user's defaults, replace the copied ones.
        """
        values: dict[str, Any] = {
            "currency": settings.DEFAULT_CURRENCY,
            "state": OrderState.CART.value,
        }

        source_order = self._source_order(line_item)
        if source_order is not None:
            values.update(
                user_id=source_order.user_id,
                email=source_order.email,
                currency=source_order.currency,
                state=source_order.state,
                ship_address=self._address_preview(source_order.ship_address_id),
                bill_address=self._address_preview(source_order.bill_address_id),
            )

        subscription = self._find_subscription(line_item.subscription_id)
        if subscription is not None:
            user = self.user_repo.get_by_id(subscription.user_id)
            values["ship_address"] = self._address_preview(subscription.shipping_address_id) or (
                self._address_preview(user.ship_address_id) if user is not None else None
            )
            values["bill_address"] = self._address_preview(subscription.billing_address_id) or (
                self._address_preview(user.bill_address_id) if user is not None else None
            )

        return OrderPreview(**values)

    def _source_order(self, line_item: SubscriptionLineItem) -> Order | None:
        if line_item.source_line_item_id is None:
            return None
        order_line = self.order_repo.get_line_item_by_id(line_item.source_line_item_id)
        if order_line is None:
            return None
        return self.order_repo.get_by_id(order_line.order_id)

    def _address_preview(self, address_id: UUID | None) -> AddressPreview | None:
        address = self.address_repo.get_by_id(address_id)
        if address is None:
            return None
        return AddressPreview.model_validate(address)

    def _find_subscription(self, subscription_id: UUID | None) -> Subscription | None:
        if subscription_id is None:
            return None
        return self.subscription_repo.get_by_id(subscription_id)

    def _get_subscription(self, subscription_id: UUID | None) -> Subscription | None:
        if subscription_id is None:
            return None
        subscription = self.subscription_repo.get_by_id(subscription_id)
        if subscription is None:
            raise NotFoundError("Subscription", subscription_id)
        return subscription
