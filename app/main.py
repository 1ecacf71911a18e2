"""BookIt – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.database import Base, engine
from app.errors import register_exception_handlers
# Import models so Base.metadata has all tables before create_all (schema source of truth)
from app.models import User, Place, Booking  # noqa: F401
from app.routers import auth, places, bookings, uploads

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(places.router)
app.include_router(bookings.router)
app.include_router(uploads.router)


@app.on_event("startup")
def startup():
    log = logging.getLogger("uvicorn.error")
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not set; refusing to start without a session signing secret")
    if settings.s3_bucket_name:
        print(f"[S3] Uploads go to bucket={settings.s3_bucket_name} region={settings.s3_region}")
    else:
        print("[S3] Not configured - /upload will fail; set S3_BUCKET_NAME (and credentials) in .env and restart")
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        log.warning("Database startup failed (tables not created). Check DATABASE_URL and network. Error: %s", e)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
