"""SubscriptionLineItem repository for data access.

Writes are flushed, not committed: the calling service owns the transaction so
that a line item change and its subscription event land together.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from subline.core.sorting import apply_order_by
from subline.models.subscription_line_item import SubscriptionLineItem


class SubscriptionLineItemRepository:
    """Repository for SubscriptionLineItem model."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        subscription_id: UUID | None = None,
        skip: int = 0,
        limit: int = 100,
        order_by: str | None = None,
    ) -> list[SubscriptionLineItem]:
        """Get line items with pagination, optionally scoped to one subscription."""
        query = self.db.query(SubscriptionLineItem)
        if subscription_id is not None:
            query = query.filter(SubscriptionLineItem.subscription_id == subscription_id)
        query = apply_order_by(query, SubscriptionLineItem, order_by)
        return query.offset(skip).limit(limit).all()

    def count(self, subscription_id: UUID | None = None) -> int:
        query = self.db.query(func.count(SubscriptionLineItem.id))
        if subscription_id is not None:
            query = query.filter(SubscriptionLineItem.subscription_id == subscription_id)
        return query.scalar() or 0

    def get_by_id(self, line_item_id: UUID) -> SubscriptionLineItem | None:
        return (
            self.db.query(SubscriptionLineItem)
            .filter(SubscriptionLineItem.id == line_item_id)
            .first()
        )

    def create(self, values: dict[str, Any]) -> SubscriptionLineItem:
        line_item = SubscriptionLineItem(**values)
        self.db.add(line_item)
        self.db.flush()
        return line_item

    def update(
        self, line_item: SubscriptionLineItem, values: dict[str, Any]
    ) -> SubscriptionLineItem:
        for key, value in values.items():
            setattr(line_item, key, value)
        self.db.flush()
        return line_item

    def delete(self, line_item: SubscriptionLineItem) -> None:
        self.db.delete(line_item)
        self.db.flush()
