"""PrepHub API. Routers, middleware and the error boundary."""

from __future__ import annotations

import logging
import re
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from prephub.auth.routes import router as auth_router
from prephub.common.errors import PrepHubError, StoreError
from prephub.common.schemas import FailureResponse, HealthCheckResponse
from prephub.core.config import get_settings
from prephub.db.base import Base, discover_feature_models, list_models
from prephub.db.session import engine
from prephub.features.questions.endpoints import router as questions_router
from prephub.features.quizzes.endpoints import router as quizzes_router
from prephub.features.stats.endpoints import router as stats_router

_settings = get_settings()
_START_TIME = datetime.now(timezone.utc)

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("prephub")

app = FastAPI(title="PrepHub Backend", version=_settings.app_version)


# ------------------------
# CORS Setup
# ------------------------
_CORS_ORIGIN_REGEX = re.compile(r"https?://(localhost|127\.0\.0\.1)(:\d+)?", re.I)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allow_origins,
    allow_origin_regex=_CORS_ORIGIN_REGEX.pattern,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------
# Custom Middlewares
# ------------------------
@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("X-Request-Id") or request.headers.get("X-Request-ID")
    req_id = incoming or str(uuid.uuid4())
    request.state.request_id = req_id
    request_logger = logging.getLogger("request")
    request_logger.info("request.start request_id=%s method=%s path=%s", req_id, request.method, request.url.path)
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    request_logger.info("request.end request_id=%s path=%s status_code=%s", req_id, request.url.path, response.status_code)
    return response


@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    t0 = time.perf_counter()
    resp = await call_next(request)
    dt = int((time.perf_counter() - t0) * 1000)
    logging.getLogger("timing").info("%s %s %dms %s", request.method, request.url.path, dt, resp.status_code)
    return resp


# ------------------------
# Error boundary
# ------------------------
def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=FailureResponse(message=message).model_dump())


@app.exception_handler(StoreError)
async def _store_error_handler(request: Request, exc: StoreError):
    logger.error("store_error path=%s detail=%s", request.url.path, exc.message, exc_info=exc)
    return _failure(exc.status_code, StoreError.public_message)


@app.exception_handler(PrepHubError)
async def _prephub_error_handler(request: Request, exc: PrepHubError):
    logger.info("request_failed path=%s status=%s message=%s", request.url.path, exc.status_code, exc.message)
    return _failure(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and errors[0].get("type") != "json_invalid":
        first = errors[0]
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid {where}: {first.get('msg')}" if where else "Malformed request body."
    else:
        message = "Malformed request body."
    return _failure(400, message)


@app.exception_handler(Exception)
async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error path=%s", request.url.path)
    return _failure(500, "Server error. Please try again later.")


# ------------------------
# Routers
# ------------------------
app.include_router(auth_router)
app.include_router(quizzes_router)
app.include_router(stats_router)
app.include_router(questions_router)


# ------------------------
# Meta endpoints
# ------------------------
@app.get("/", tags=["meta"], summary="API Root")
async def root():
    return {
        "name": "PrepHub Backend",
        "status": "ok",
        "docs": "/docs",
        "health": "/healthz",
    }


@app.get("/healthz", tags=["meta"], summary="Liveness / readiness probe", response_model=HealthCheckResponse)
def healthz() -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    db_latency_ms: float | None = None

    try:
        start = time.perf_counter()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_latency_ms = round((time.perf_counter() - start) * 1000, 2)
        db_status = "ok"
    except SQLAlchemyError as e:
        db_status = f"error:{type(e).__name__}"

    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "time_utc": now,
        "uptime_seconds": round((now - _START_TIME).total_seconds(), 2),
        "version": _settings.app_version,
        "environment": "debug" if _settings.debug else "prod",
        "components": {
            "database": (
                {"status": db_status, "latency_ms": db_latency_ms}
                if db_status == "ok"
                else {"status": db_status}
            ),
        },
        "counts": {"routes": len(app.routes), "models": len(list_models())},
    }


# ------------------------
# Startup
# ------------------------
@app.on_event("startup")
def _create_tables() -> None:
    if not _settings.auto_create_tables:
        return
    discover_feature_models()
    Base.metadata.create_all(bind=engine)
    logger.info("tables_ready models=%s", ",".join(list_models()))
