# app/api/deps.py
from fastapi import Depends
from app.core.config import Settings, get_settings
from app.domain.repositories.catalog_repo import CatalogRepo
from app.domain.services.render_svc import PageRenderer, get_renderer

# Dependency for injecting a catalog repository into endpoints (fresh per request, no shared state)
def catalog_repo(settings: Settings = Depends(get_settings)) -> CatalogRepo:
    return CatalogRepo(settings.CATALOG_URL)

# Dependency for injecting the shared, read-only page renderer
def renderer_dep() -> PageRenderer:
    return get_renderer()
