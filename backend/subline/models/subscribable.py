from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from subline.core.database import Base
from subline.models.shared import UUIDType, generate_uuid


class Subscribable(Base):
    """Catalog item that can be put on a recurring order."""

    __tablename__ = "subscribables"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    sku = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)
    price_cents = Column(Integer, nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    subscribable = Column(Boolean, nullable=False, default=True)
    stock_on_hand = Column(Integer, nullable=False, default=0)
    backorderable = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def can_supply(self, quantity: int) -> bool:
        if self.deleted_at is not None:
            return False
        return bool(self.backorderable) or int(self.stock_on_hand or 0) >= quantity
