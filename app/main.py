import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.config import settings
from app.core.database.db import engine, SessionLocal
from app.core.database.base import Base
from app.core.logging import configure_logging
from blocks import register_blocks
from blocks.registry import block_registry
from content.domain import models  # noqa: F401  (table registration)
from content.domain.repositories import ContentRepository, ContentTypeRepository, TermRepository
from content.services.content_service import ContentService

# Routers
from blocks.routers import blocks_router

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dev-friendly table creation, built-in content types, block registration
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with SessionLocal() as session:
        await ContentService(
            ContentTypeRepository(session), ContentRepository(session), TermRepository(session)
        ).ensure_content_types()
    register_blocks(block_registry)
    block_registry.lock()
    logger.info("%s started with %d block type(s)", settings.app_name, len(block_registry.all()))
    yield
    # Shutdown
    block_registry.clear()
    await engine.dispose()



app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


# Blocks
app.include_router(blocks_router)
