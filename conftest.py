# conftest.py
from datetime import datetime
from typing import AsyncGenerator, Iterable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database.db import get_session
from app.core.database.base import Base
from blocks import register_blocks
from blocks.registry import block_registry
from content.domain.models import Content, ContentStatus, Taxonomy, Term
from content.domain.repositories import ContentRepository, ContentTypeRepository, TermRepository
from content.services.content_service import ContentService


# ---- Async engine + session --------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def async_engine():
    # StaticPool: every connection sees the same in-memory database
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def SessionMaker(async_engine):
    return async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)

@pytest_asyncio.fixture(autouse=True, scope="function")
async def override_get_session(SessionMaker):
    async def _dep():
        async with SessionMaker() as s:
            yield s
    app.dependency_overrides[get_session] = _dep
    yield
    app.dependency_overrides.pop(get_session, None)

@pytest_asyncio.fixture
async def db_session(SessionMaker):
    async with SessionMaker() as s:
        yield s


# ---- Host content store ------------------------------------------------------

@pytest_asyncio.fixture
async def services(db_session: AsyncSession) -> ContentService:
    return ContentService(
        ContentTypeRepository(db_session),
        ContentRepository(db_session),
        TermRepository(db_session),
    )

@pytest_asyncio.fixture
async def content_types(services: ContentService):
    """Built-in content types: post, page, attachment (public), revision, nav_menu_item."""
    return await services.ensure_content_types()

@pytest_asyncio.fixture
async def add_term(db_session: AsyncSession):
    async def _add(taxonomy: Taxonomy, slug: str, name: Optional[str] = None, parent: Optional[Term] = None) -> Term:
        term = Term(taxonomy=taxonomy, slug=slug, name=name or slug, parent_id=parent.id if parent else None)
        db_session.add(term)
        await db_session.commit()
        return term
    return _add

@pytest_asyncio.fixture
async def add_content(db_session: AsyncSession):
    async def _add(
        title: str,
        *,
        content_type: str = "post",
        status: ContentStatus = ContentStatus.publish,
        published_at: Optional[datetime] = None,
        terms: Iterable[Term] = (),
    ) -> Content:
        obj = Content(
            title=title,
            content_type=content_type,
            status=status,
            published_at=published_at,
            terms=list(terms),
        )
        db_session.add(obj)
        await db_session.commit()
        return obj
    return _add

@pytest_asyncio.fixture
async def foo_baz(add_term):
    """The tag and category the Site Counts listing filters on."""
    return (
        await add_term(Taxonomy.post_tag, "foo", "Foo"),
        await add_term(Taxonomy.category, "baz", "Baz"),
    )


# ---- Block registry ----------------------------------------------------------

@pytest.fixture
def registered_blocks():
    register_blocks(block_registry)
    block_registry.lock()
    yield block_registry
    block_registry.clear()


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client(registered_blocks, content_types) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
