from sqlalchemy import Column, DateTime, ForeignKey, String, func

from subline.core.database import Base
from subline.models.shared import UUIDType, generate_uuid


class User(Base):
    """Account owning subscriptions; carries the default addresses."""

    __tablename__ = "users"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, index=True, nullable=False)
    ship_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    bill_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
