"""Property listings."""
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime
from sqlalchemy.sql import func
from app.database import Base, JSONList


class Place(Base):
    __tablename__ = "places"

    id = Column(Integer, primary_key=True, index=True)
    # Opaque reference to users.id; set once at creation
    owner_id = Column(Integer, nullable=False, index=True)

    title = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    photos = Column(JSONList, nullable=False, default=list)
    description = Column(Text, nullable=True)
    perks = Column(JSONList, nullable=False, default=list)

    checkin = Column(String(50), nullable=True)  # e.g. "14:00"
    checkout = Column(String(50), nullable=True)
    max_guests = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
