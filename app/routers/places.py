"""Property listings."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.place import PlaceCreate, PlaceResponse
from app.services import places

router = APIRouter(tags=["places"])


@router.post("/place", response_model=PlaceResponse, status_code=201)
def create_place(
    data: PlaceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    place = places.create(db, current_user.id, data)
    return PlaceResponse.model_validate(place)


@router.get("/allplaces", response_model=list[PlaceResponse])
def list_places(db: Session = Depends(get_db)):
    return [PlaceResponse.model_validate(p) for p in places.list_all(db)]


@router.get("/place/{place_id}", response_model=PlaceResponse)
def get_place(place_id: int, db: Session = Depends(get_db)):
    return PlaceResponse.model_validate(places.get_by_id(db, place_id))


@router.get("/userplaces", response_model=list[PlaceResponse])
def list_my_places(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [PlaceResponse.model_validate(p) for p in places.list_by_owner(db, current_user.id)]


@router.delete("/place/{place_id}", response_model=MessageResponse)
def delete_place(
    place_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    places.delete_if_owned_by(db, place_id, current_user.id)
    return MessageResponse(message="Place deleted successfully")
