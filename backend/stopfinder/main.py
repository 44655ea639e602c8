import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stopfinder.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(settings.log_dir)
if not _LOG_DIR.is_absolute():
    _LOG_DIR = Path(__file__).resolve().parent.parent / _LOG_DIR
_LOG_DIR.mkdir(parents=True, exist_ok=True)

_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "stopfinder.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from stopfinder.routers import airports, search
from stopfinder.schemas.flight import FieldError, ValidationErrorResponse
from stopfinder.services.amadeus_client import amadeus_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if amadeus_client.is_configured:
        logger.info("Amadeus credentials found, live offers enabled")
    else:
        logger.warning("Amadeus credentials not configured, searches will use generated offers")

    yield

    # Shutdown
    await amadeus_client.close()
    logger.info("Amadeus client closed")


app = FastAPI(
    title="StopFinder",
    description="Multi-airport flight search with stopover recommendations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts) or "body"


def _error_message(msg: str) -> str:
    return msg.removeprefix("Value error, ")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        FieldError(field=_field_name(err.get("loc", ())), message=_error_message(err.get("msg", "")))
        for err in exc.errors()
    ]
    logger.info(f"Rejected {request.method} {request.url.path}: {len(details)} validation errors")
    body = ValidationErrorResponse(details=details, timestamp=datetime.now(timezone.utc).isoformat())
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


app.include_router(search.router, prefix="/api/flights", tags=["flights"])
app.include_router(airports.router, prefix="/api/airports", tags=["airports"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "stopfinder", "provider": amadeus_client.is_configured}
