import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler

from app.core.config import settings
from app.core.security import limiter
from app.database.create_database import create_all_tables
from app.routers import contact_messages
from app.schemas.contact_messages import HealthResponse
from app.utils.contact_service import ContactNotFoundError, ContactStoreError
from app.utils.pinger import LivenessPinger
from app.utils.validators import ContactValidationError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Contact Inbox API",
    description="Anonymous or attributed contact form submissions.",
    version="1.0.0",
)
app.state.limiter = limiter
app.state.pinger = None
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ContactValidationError)
async def contact_validation_handler(request: Request, exc: ContactValidationError):
    return JSONResponse(status_code=400, content={"success": False, "message": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"success": False, "message": "Invalid request body"})


@app.exception_handler(ContactNotFoundError)
async def contact_not_found_handler(request: Request, exc: ContactNotFoundError):
    return JSONResponse(status_code=404, content={"success": False, "message": "Message not found"})


@app.exception_handler(ContactStoreError)
async def contact_store_handler(request: Request, exc: ContactStoreError):
    logger.error(f"Error handling {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


# Anything else that escapes a route
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


@app.on_event("startup")
async def on_startup():
    create_all_tables()
    logger.info(f"Server running on port {settings.PORT}")
    logger.info(f"Health check: {settings.SELF_PING_URL}")
    if settings.PING_ENABLED:
        app.state.pinger = LivenessPinger()
        app.state.pinger.start()


@app.on_event("shutdown")
async def on_shutdown():
    if app.state.pinger is not None:
        await app.state.pinger.stop()
        app.state.pinger = None


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contact_messages.router, prefix="/api/contact", tags=["Contact Messages"])


@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


# Root endpoint
@app.get("/")
def read_root():
    return {"message": "Welcome to the Contact Inbox API"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
