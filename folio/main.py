import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.dependencies import build_site
from folio.routers import pages
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="folio", description="Preview of the statically generated blog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Built once per process; the served paths never change afterwards
    app.state.site = build_site(settings)
    logger.info(f"Serving {len(app.state.site.paths)} generated files")

    try:
        yield
    finally:
        app.state.site = None
        logger.info("Preview server stopped")


app.router.lifespan_context = lifespan

app.include_router(pages.router)
