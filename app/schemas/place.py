"""Listing schemas."""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field


class PlaceCreate(BaseModel):
    """Accepts the frontend's field names (desc, maxguest) as well as the column names."""
    title: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=500)
    photos: list[str] = []
    description: str | None = Field(default=None, validation_alias=AliasChoices("description", "desc"))
    perks: list[str] = []
    checkin: str | None = Field(default=None, max_length=50)
    checkout: str | None = Field(default=None, max_length=50)
    max_guests: int | None = Field(default=None, ge=1, validation_alias=AliasChoices("max_guests", "maxguest", "maxGuests"))
    price: float | None = Field(default=None, ge=0)


class PlaceResponse(BaseModel):
    id: int
    owner_id: int
    title: str
    address: str
    photos: list[str]
    description: str | None
    perks: list[str]
    checkin: str | None
    checkout: str | None
    max_guests: int | None
    price: float | None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
