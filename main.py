import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bizdirectory.core.config import CORS_ORIGINS, DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, LOG_LEVEL
from bizdirectory.core.logging_config import setup_logging
from bizdirectory.crud.admins import ensure_default_admin
from bizdirectory.database import Base, SessionLocal, engine

# import models so they are registered on the metadata
import bizdirectory.models  # noqa: F401

from bizdirectory.routes.auth import router as auth_router
from bizdirectory.routes.businesses import router as businesses_router
from bizdirectory.routes.documents import router as documents_router

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Business Directory API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create tables (after models are imported)
Base.metadata.create_all(bind=engine)


@app.on_event("startup")
def seed_default_admin() -> None:
    if not (DEFAULT_ADMIN_USERNAME and DEFAULT_ADMIN_PASSWORD):
        return
    db = SessionLocal()
    try:
        ensure_default_admin(db, DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD)
    finally:
        db.close()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Error bodies carry a ``message`` the client can show as is"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected invalid request to {request.url.path}: {len(exc.errors())} errors")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Dữ liệu không hợp lệ", "errors": jsonable_encoder(exc.errors())},
    )


app.include_router(businesses_router, prefix="/api/businesses", tags=["businesses"])
app.include_router(documents_router, prefix="/api", tags=["documents"])
app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

@app.get("/")
def read_root():
    return {"status": "ok"}
