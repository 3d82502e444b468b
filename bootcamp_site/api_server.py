import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from . import runtime
from .config import SiteConfig
from .contact import handle_submission
from .data import CURRICULUM, STATS, TOOLS
from .exceptions import ContactValidationError
from .models import BootcampStats, CurriculumEntry, HealthResponse, MessageResponse, ToolEntry

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET", "/", "Main HTML page"),
    ("POST", "/api/contact", "Contact form submission"),
    ("GET", "/api/stats", "Bootcamp statistics"),
    ("GET", "/api/curriculum", "Curriculum information"),
    ("GET", "/api/tools", "DevOps tools information"),
    ("GET", "/health", "Health check"),
)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
READ_METHODS = ["GET", "HEAD"]
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def resolve_static_path(root: Path, relative: str) -> Optional[Path]:
    """Map a URL path onto a file under root, or None if there is no such file.

    Directories resolve to their index.html. Anything escaping root is rejected.
    """
    candidate = (root / relative).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    if candidate.is_dir():
        candidate = candidate / "index.html"
    if candidate.is_file():
        return candidate
    return None


async def read_body(request: Request) -> Any:
    """Decode a JSON or form body. Returns None when the body can't be decoded.

    Bodies of any other content type are ignored, as if nothing was sent.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except (MultiPartException, StarletteHTTPException):
            return None
        return dict(form)

    if media_type != JSON_CONTENT_TYPE:
        return {}
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        return None


def create_app(config: Optional[SiteConfig] = None) -> FastAPI:
    config = config or SiteConfig()

    # Initialize FastAPI app; the site has no interactive API docs
    app = FastAPI(
        title="DevOps Bootcamp Site",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config

    # Request logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        client = request.client.host if request.client else "-"
        logger.info(f"{request.method} {request.url.path} - {client}")
        return await call_next(request)

    # Error responders
    @app.exception_handler(ContactValidationError)
    async def contact_validation_error(request: Request, exc: ContactValidationError):
        return JSONResponse(status_code=400, content={"success": False, "message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.exception(f"Error: {exc!r}")
        return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})

    # Main HTML page
    @app.api_route("/", methods=READ_METHODS, include_in_schema=False)
    async def index():
        index_path = resolve_static_path(config.STATIC_DIR, config.INDEX_FILE)
        if index_path is None:
            raise HTTPException(status_code=404)
        return FileResponse(index_path)

    # Contact form submission
    @app.post("/api/contact", response_model=MessageResponse)
    async def submit_contact(request: Request):
        payload = await read_body(request)
        return await handle_submission(payload, config.CONTACT_DELAY)

    @app.api_route("/api/stats", methods=READ_METHODS, response_model=BootcampStats)
    async def get_stats():
        return STATS

    @app.api_route("/api/curriculum", methods=READ_METHODS, response_model=List[CurriculumEntry])
    async def get_curriculum():
        return list(CURRICULUM)

    @app.api_route("/api/tools", methods=READ_METHODS, response_model=List[ToolEntry])
    async def get_tools():
        return list(TOOLS)

    # Health check endpoint
    @app.api_route("/health", methods=READ_METHODS, response_model=HealthResponse)
    async def health_check():
        return HealthResponse(
            status="OK",
            instance_id=config.INSTANCE_ID,
            timestamp=runtime.utc_timestamp(),
            uptime=runtime.uptime(),
            port=config.PORT,
            python_version=runtime.python_version(),
            memory_usage=runtime.memory_usage(),
        )

    # Everything else is a static file or a 404; must stay registered last
    @app.api_route("/{file_path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def static_files(request: Request, file_path: str):
        if request.method in READ_METHODS:
            target = resolve_static_path(config.STATIC_DIR, file_path)
            if target is not None:
                return FileResponse(target)
        raise HTTPException(status_code=404)

    return app
