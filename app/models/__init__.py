"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table; no migration scripts needed for fresh installs.
"""
from app.models.user import User
from app.models.place import Place
from app.models.booking import Booking

__all__ = [
    "User",
    "Place",
    "Booking",
]
