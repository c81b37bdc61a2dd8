from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn

from relay.api.endpoints import contact
from relay.core.config import Settings, get_settings
from relay.core.exceptions import RelayError
from relay.core.logging import setup_logging
from relay.models.contact import HealthResponse
from relay.utils.request_logging_middleware import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    logger.info(f"{settings.PROJECT_NAME} listening on http://{settings.HOST}:{settings.PORT}")
    logger.info(
        f"Brevo API Key: {'Configured' if settings.BREVO_API_KEY else 'Not configured'}"
    )
    logger.info(f"Receiver Email: {settings.RECEIVER_EMAIL}")
    if settings.receiver_is_default:
        logger.warning("RECEIVER_EMAIL is not set, falling back to the default receiver")
    yield


app = FastAPI(
    title=get_settings().PROJECT_NAME,
    description="Relays contact form submissions to Brevo's transactional email API",
    version="0.1.0",
    lifespan=lifespan,
    debug=get_settings().DEBUG,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contact.router, tags=["contact"])


@app.get("/health", response_model=HealthResponse, tags=["status"])
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "service": settings.PROJECT_NAME}


@app.exception_handler(RelayError)
async def relay_exception_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_content()))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Malformed request body on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def run() -> None:
    setup_logging()
    settings = get_settings()
    uvicorn.run(
        "relay.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
