"""FastAPI application wiring."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_SETTINGS
from .errors import HireBotError
from .llm.client import LLMClient
from .llm.resolver import resolve_provider_config
from .routers import interview_router, resume_router

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request body")
    return f"{location}: {message}" if location else message


def create_app(
    config: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FastAPI:
    """Builds the app; the provider config is resolved exactly once here."""
    config = config or DEFAULT_SETTINGS
    env = os.environ if environ is None else environ

    provider_config = resolve_provider_config(env)
    llm_client = None
    if provider_config is None:
        logger.warning("No AI provider credential configured; generation endpoints are disabled")
    else:
        llm_client = LLMClient(
            provider_config,
            timeout_seconds=config.get("llm", {}).get("timeout_seconds"),
        )
        logger.info("AI provider configured: %s", provider_config.describe())

    app = FastAPI(title="HireBot API")
    app.state.provider_config = provider_config
    app.state.llm_client = llm_client
    app.state.jwt_secret = (env.get("JWT_SECRET") or "").strip()
    app.state.jwt_algorithm = config.get("auth", {}).get("jwt_algorithm", "HS256")

    prefix = config.get("server", {}).get("api_prefix", "/api")
    app.include_router(interview_router, prefix=prefix)
    app.include_router(resume_router, prefix=prefix)

    @app.get(f"{prefix}/health")
    def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "message": "Server is running",
            "aiConfigured": app.state.llm_client is not None,
        }

    @app.exception_handler(HireBotError)
    async def hirebot_error_handler(request: Request, exc: HireBotError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log("%s %s -> %s %s: %s", request.method, request.url.path, exc.status_code, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    return app
