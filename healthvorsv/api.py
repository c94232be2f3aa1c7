# -*- coding: utf-8 -*-
"""
HealthVorsv API

Food, water and weight logging with daily and historical nutrition summaries.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .config import settings
from .foods.api import router as foods_router
from .logs.api import router as logs_router
from .nutrition.api import router as nutrition_router
from .profile.api import router as profile_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="HealthVorsv",
    description="Diet and fitness tracking: food/water/weight logs, goals and summaries",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/auth/logout",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = get_current_user_from_request(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(foods_router)
app.include_router(logs_router)
app.include_router(nutrition_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


# Static frontend (single-page build), served after the API routes.
if settings.frontend_dir.exists():
    app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
else:
    @app.get("/", include_in_schema=False)
    def root() -> dict:
        return {"message": "HealthVorsv API", "docs": "/api/docs"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting HealthVorsv on http://%s:%s", settings.host, settings.port)
    uvicorn.run("healthvorsv.api:app", host=settings.host, port=settings.port, reload=False)
