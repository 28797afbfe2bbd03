# app/api/v1/routers/products.py

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
import time

from app.api.deps import catalog_repo, renderer_dep
from app.domain.errors import FetchError
from app.domain.repositories.catalog_repo import CatalogRepo
from app.domain.services.render_svc import PageRenderer

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


def _fetch_error_response(route: str, err: FetchError) -> PlainTextResponse:
    logger.error("Response: %s fetch failed reason=%s err=%s", route, err.reason, err)
    return PlainTextResponse(f"Error fetching products: {err}", status_code=500)


@router.get("/", response_class=HTMLResponse, summary="Full product page")
async def products_page(
    repo: CatalogRepo = Depends(catalog_repo),
    renderer: PageRenderer = Depends(renderer_dep),
):
    """
    Full HTML document: page shell, reload button, product table.
    """
    logger.info("Request: products_page")
    start_time = time.perf_counter()

    try:
        products = await repo.fetch_products()
    except FetchError as e:
        return _fetch_error_response("products_page", e)

    body = renderer.render_full_page(products)
    logger.info(
        "Response: products_page count=%s elapsed_time=%.4fs",
        len(products), time.perf_counter() - start_time,
    )
    return HTMLResponse(body)


@router.get("/products-table", response_class=HTMLResponse, summary="Product table fragment")
async def products_table(
    repo: CatalogRepo = Depends(catalog_repo),
    renderer: PageRenderer = Depends(renderer_dep),
):
    """
    Table fragment only; the page's reload button swaps it in with htmx.
    """
    logger.info("Request: products_table")
    start_time = time.perf_counter()

    try:
        products = await repo.fetch_products()
    except FetchError as e:
        return _fetch_error_response("products_table", e)

    body = renderer.render_fragment(products)
    logger.info(
        "Response: products_table count=%s elapsed_time=%.4fs",
        len(products), time.perf_counter() - start_time,
    )
    return HTMLResponse(body)
