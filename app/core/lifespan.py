# app/core/lifespan.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from app.core.config import get_settings
from app.domain.services.render_svc import get_renderer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Templates are compiled once here and shared by every request
    get_renderer()
    logger.info("Templates compiled")
    logger.info("Catalog source: %s", settings.CATALOG_URL)
    logger.info("Server running at http://localhost:%s", settings.PORT)

    # Application runs
    yield

    # --- Shutdown ---
    # Nothing to release: no pooled clients, no connections held across requests
    logger.info("Server stopped")
