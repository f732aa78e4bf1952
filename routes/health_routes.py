"""
Liveness and health endpoints.

GET /api     — liveness message, no dependencies touched.
GET /health  — checks the database and the email provider configuration.
Rules:
- Database failure → "unhealthy" (503) — nothing works without it.
- Email provider not configured → "degraded" (200) — reads still work,
  only admin sign-in is affected.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from infrastructure.database import ping
from schemas.dto.responses.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api")
async def liveness() -> dict[str, str]:
    return {"status": "ok", "message": "API is running"}


@router.get("/health")
async def health_check(request: Request) -> JSONResponse:
    checks: dict[str, str] = {}
    overall = "healthy"

    try:
        await ping(request.app.state.engine)
        checks["database"] = "ok"
    except Exception:
        checks["database"] = "error"
        overall = "unhealthy"

    email_provider = request.app.state.email_provider
    if email_provider is not None and email_provider.is_configured:
        checks["email"] = "ok"
    else:
        checks["email"] = "not_configured"
        if overall == "healthy":
            overall = "degraded"

    status_code = 503 if overall == "unhealthy" else 200
    body = HealthResponse(status=overall, checks=checks)
    return JSONResponse(status_code=status_code, content=body.model_dump())
