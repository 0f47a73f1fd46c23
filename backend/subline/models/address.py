from sqlalchemy import Column, DateTime, String, func

from subline.core.database import Base
from subline.models.shared import UUIDType, generate_uuid


class Address(Base):
    __tablename__ = "addresses"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    firstname = Column(String(255), nullable=True)
    lastname = Column(String(255), nullable=True)
    address1 = Column(String(255), nullable=False)
    address2 = Column(String(255), nullable=True)
    city = Column(String(255), nullable=False)
    zipcode = Column(String(20), nullable=True)
    state_name = Column(String(255), nullable=True)
    country_iso = Column(String(2), nullable=False, default="US")
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
