from fastapi import FastAPI
from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.api.v1.routers.products import router as products_router
from app.api.v1.routers.health import router as health_router
from app.core.logging import configure_logging

import logging
import uvicorn

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- Routes -------
app.include_router(health_router)
app.include_router(products_router)          # full page + htmx table fragment


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
