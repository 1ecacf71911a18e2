"""Bookings. The booking's user is always the session's user."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.booking import BookingCreate, BookingCreated, BookingResponse
from app.services import bookings

router = APIRouter(tags=["bookings"])


@router.post("/booking", response_model=BookingCreated)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    booking = bookings.create(db, current_user.id, data)
    return BookingCreated(booking=BookingResponse.model_validate(booking))


@router.get("/userbookings", response_model=list[BookingResponse])
def list_my_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [BookingResponse.model_validate(b) for b in bookings.list_by_requester(db, current_user.id)]


@router.get("/booking/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return BookingResponse.model_validate(bookings.get_for_requester(db, booking_id, current_user.id))
