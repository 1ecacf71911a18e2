"""Booking schemas."""
import re
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field, field_validator

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15


def _normalize_phone(value: str | int | None) -> str:
    if value is None:
        return ""
    return re.sub(r"\D", "", str(value).strip())


class BookingCreate(BaseModel):
    """Caller identity is never read from the body; fields such as "user" or "userid" are ignored."""
    place_id: int = Field(validation_alias=AliasChoices("place_id", "listingId", "id"))
    name: str = Field(min_length=1, max_length=255)
    phone: str = Field(validation_alias=AliasChoices("phone", "tele"))
    checkin: str | None = Field(default=None, max_length=50)
    checkout: str | None = Field(default=None, max_length=50)
    guests: int | None = Field(default=None, ge=1, validation_alias=AliasChoices("guests", "guest", "guests_no"))
    price: float | None = Field(default=None, ge=0)
    photos: list[str] = []

    @field_validator("phone", mode="before")
    @classmethod
    def phone_valid(cls, v: str | int | None) -> str:
        # The original frontend posts the phone as a number
        digits = _normalize_phone(v)
        if not digits:
            raise ValueError("Phone number is required.")
        if len(digits) < PHONE_MIN_DIGITS:
            raise ValueError(f"Phone number must have at least {PHONE_MIN_DIGITS} digits.")
        if len(digits) > PHONE_MAX_DIGITS:
            raise ValueError(f"Phone number cannot exceed {PHONE_MAX_DIGITS} digits.")
        return str(v).strip()


class BookingResponse(BaseModel):
    id: int
    user_id: int
    place_id: int
    name: str
    phone: str
    photos: list[str]
    checkin: str | None
    checkout: str | None
    guests: int | None
    price: float | None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class BookingCreated(BaseModel):
    message: str = "Booking created successfully"
    booking: BookingResponse
