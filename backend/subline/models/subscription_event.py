"""SubscriptionEvent model: the audit trail of a subscription."""

from enum import Enum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from subline.core.database import Base
from subline.models.shared import UUIDType, generate_uuid, utc_now


class SubscriptionEventType(str, Enum):
    LINE_ITEM_CREATED = "line_item_created"
    LINE_ITEM_UPDATED = "line_item_updated"
    LINE_ITEM_DESTROYED = "line_item_destroyed"


class SubscriptionEvent(Base):
    """Append-only record of something that happened to a subscription."""

    __tablename__ = "subscription_events"
    __table_args__ = (UniqueConstraint("subscription_id", "sequence"),)

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    subscription_id = Column(
        UUIDType,
        ForeignKey("subscriptions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sequence = Column(Integer, nullable=False)
    event_type = Column(String(50), nullable=False, index=True)
    details = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
