"""Listing store."""
from sqlalchemy.orm import Session

from app.errors import AuthError, AuthFailure, NotFoundError
from app.models.place import Place
from app.schemas.place import PlaceCreate


def create(db: Session, owner_id: int, data: PlaceCreate) -> Place:
    place = Place(
        owner_id=owner_id,
        title=data.title,
        address=data.address,
        photos=list(data.photos),
        description=data.description,
        perks=list(data.perks),
        checkin=data.checkin,
        checkout=data.checkout,
        max_guests=data.max_guests,
        price=data.price,
    )
    db.add(place)
    db.commit()
    db.refresh(place)
    return place


def list_all(db: Session) -> list[Place]:
    return db.query(Place).order_by(Place.id).all()


def get_by_id(db: Session, place_id: int) -> Place:
    place = db.query(Place).filter(Place.id == place_id).first()
    if not place:
        raise NotFoundError("Place not found")
    return place


def list_by_owner(db: Session, owner_id: int) -> list[Place]:
    return db.query(Place).filter(Place.owner_id == owner_id).order_by(Place.id).all()


def delete_if_owned_by(db: Session, place_id: int, caller_id: int) -> None:
    """Delete in one conditional statement; 0 rows means absent or someone else's."""
    deleted = (
        db.query(Place)
        .filter(Place.id == place_id, Place.owner_id == caller_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if not deleted:
        raise AuthError(AuthFailure.forbidden, "Place not found or you do not have permission to delete it")
