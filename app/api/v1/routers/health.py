# app/api/v1/routers/health.py
import time
import subprocess
from functools import lru_cache
from fastapi import APIRouter
from app.core.config import get_settings
from app.domain.services.render_svc import get_renderer

router = APIRouter(tags=["health"])
START_TIME = time.time()


@lru_cache
def _git_sha(short: bool = True) -> str:
    """Resolved once per process; the checkout does not change while serving."""
    cmd = ["git", "rev-parse", "--short", "HEAD"] if short else ["git", "rev-parse", "HEAD"]
    try:
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
def health():
    """
    Liveness check. Does not call the upstream catalog:
    a catalog outage shows up as 500s on the product routes, not here.
    """
    settings = get_settings()
    version = settings.GIT_SHA if settings.GIT_SHA != "unknown" else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": version,
        "uptime_seconds": int(time.time() - START_TIME),
        "catalog_url": settings.CATALOG_URL,
    }

    try:
        get_renderer()
        checks["templates"] = "ok"
    except Exception as e:
        checks["templates"] = f"error: {e}"

    status = "ok" if checks["templates"] == "ok" else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
