from app.schemas.auth import UserCreate, UserLogin, UserResponse, RegisterResponse, MessageResponse
from app.schemas.place import PlaceCreate, PlaceResponse
from app.schemas.booking import BookingCreate, BookingResponse, BookingCreated
