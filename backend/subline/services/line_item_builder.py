"""Builds transient order lines from subscription line items."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from subline.models.subscription_line_item import SubscriptionLineItem
from subline.repositories.catalog_repository import SubscribableRepository
from subline.schemas.preview import LineItemPreview, OrderPreview

logger = logging.getLogger(__name__)


class LineItemBuilder:
    """Turn subscription line items into unsaved order lines at current prices."""

    def __init__(self, db: Session):
        self.subscribable_repo = SubscribableRepository(db)

    def build(self, line_items: Sequence[SubscriptionLineItem]) -> list[LineItemPreview]:
        """Build one order line per line item whose subscribable can be supplied.

        Line items whose subscribable is missing, no longer subscribable, or
        out of stock for the requested quantity are skipped.
        """
        subscribables = self.subscribable_repo.get_by_ids(
            [li.subscribable_id for li in line_items if li.subscribable_id is not None]
        )

        lines: list[LineItemPreview] = []
        for line_item in line_items:
            subscribable = subscribables.get(line_item.subscribable_id)
            quantity = int(line_item.quantity or 0)
            if (
                subscribable is None
                or not subscribable.subscribable
                or not subscribable.can_supply(quantity)
            ):
                logger.debug(
                    "Skipping subscribable %s: cannot supply %d units",
                    line_item.subscribable_id,
                    quantity,
                )
                continue

            price_cents = subscribable.price_cents
            lines.append(
                LineItemPreview(
                    subscribable_id=subscribable.id,
                    quantity=quantity,
                    price_cents=price_cents,
                    currency=str(subscribable.currency),
                    amount_cents=price_cents * quantity if price_cents is not None else None,
                )
            )
        return lines

    @staticmethod
    def validate(line: LineItemPreview, order: OrderPreview | None) -> list[str]:
        """Return the validation messages of an order line placed on ``order``."""
        errors: list[str] = []
        if line.quantity <= 0:
            errors.append("quantity must be greater than 0")
        if line.price_cents is None:
            errors.append("price must be present")
        if order is not None and order.currency != line.currency:
            errors.append(
                f"currency {line.currency} does not match order currency {order.currency}"
            )
        return errors
