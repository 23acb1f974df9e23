from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from blocks.errors import UnknownBlockError
from blocks.metadata import BlockAttribute
from blocks.registry import BlockContext, BlockRegistry, block_registry
from content.domain.repositories import ContentRepository, ContentTypeRepository, TermRepository
from content.services.content_service import ContentService

router = APIRouter(prefix="/v1/blocks", tags=["blocks"])


class BlockTypeOut(BaseModel):
    name: str
    title: str
    category: str
    description: Optional[str] = None
    attributes: Dict[str, BlockAttribute] = {}


class RenderContext(BaseModel):
    post_id: Optional[int] = Field(default=None, ge=0, description="Id of the item the block is rendered in.")


class RenderRequest(BaseModel):
    attributes: Dict[str, Any] = {}
    content: str = ""
    context: RenderContext = RenderContext()


def get_registry() -> BlockRegistry:
    return block_registry

async def get_services(db: AsyncSession = Depends(get_session)) -> ContentService:
    return ContentService(ContentTypeRepository(db), ContentRepository(db), TermRepository(db))


@router.get(
    "",
    summary="List registered blocks",
    description="Returns every server-rendered block type registered at startup, with its declared attributes.",
    response_model=List[BlockTypeOut],
)
async def list_blocks(registry: BlockRegistry = Depends(get_registry)):
    return [
        BlockTypeOut(
            name=b.metadata.name,
            title=b.metadata.title,
            category=b.metadata.category,
            description=b.metadata.description,
            attributes=b.metadata.attributes,
        )
        for b in registry.all()
    ]

@router.post(
    "/{namespace}/{slug}/render",
    summary="Render a block",
    description=(
        "Runs the block's render callback and returns its markup.\n\n"
        "Declared attributes that are missing or mistyped fall back to their defaults. "
        "`context.post_id` is the id of the item the block sits in; it is excluded from listings."
    ),
    response_class=HTMLResponse,
    responses={
        200: {"description": "Rendered markup.", "content": {"text/html": {}}},
        404: {"description": "No block registered under that name."},
    },
)
async def render_block(
    payload: RenderRequest,
    namespace: str = Path(..., description="Block namespace, e.g. `site-counts`"),
    slug: str = Path(..., description="Block slug, e.g. `site-counts`"),
    registry: BlockRegistry = Depends(get_registry),
    services: ContentService = Depends(get_services),
):
    name = f"{namespace}/{slug}"
    try:
        html = await registry.render(
            name,
            payload.attributes,
            payload.content,
            BlockContext(content=services, post_id=payload.context.post_id),
        )
    except UnknownBlockError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="block not found")
    return HTMLResponse(html)
