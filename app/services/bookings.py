"""Reservation store. Every booking belongs to the user whose session created it."""
from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.schemas.booking import BookingCreate
from app.errors import ensure_owned_by
from app.services import places


def create(db: Session, caller_id: int, data: BookingCreate) -> Booking:
    # Price and guest count are taken as submitted, not checked against the listing
    place = places.get_by_id(db, data.place_id)
    booking = Booking(
        user_id=caller_id,
        place_id=data.place_id,
        name=data.name,
        phone=data.phone,
        photos=list(data.photos or place.photos or []),
        checkin=data.checkin,
        checkout=data.checkout,
        guests=data.guests,
        price=data.price,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def list_by_requester(db: Session, caller_id: int) -> list[Booking]:
    return db.query(Booking).filter(Booking.user_id == caller_id).order_by(Booking.id).all()


def get_for_requester(db: Session, booking_id: int, caller_id: int) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    ensure_owned_by(booking.user_id if booking else None, caller_id, "Booking")
    return booking
