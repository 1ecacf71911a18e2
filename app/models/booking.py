"""Bookings. Details are denormalized from the request at booking time."""
from sqlalchemy import Column, Integer, String, Numeric, DateTime
from sqlalchemy.sql import func
from app.database import Base, JSONList


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    # Always the verified session's user, never a request field
    user_id = Column(Integer, nullable=False, index=True)
    place_id = Column(Integer, nullable=False, index=True)

    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    photos = Column(JSONList, nullable=False, default=list)

    checkin = Column(String(50), nullable=True)
    checkout = Column(String(50), nullable=True)
    guests = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
