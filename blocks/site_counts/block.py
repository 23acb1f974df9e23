from pathlib import Path
from typing import Any, Dict

from blocks.registry import BlockInstance, BlockRegistry, BlockType, block_registry, register_block_type_from_metadata
from blocks.site_counts.aggregator import aggregate_counts
from blocks.site_counts.lister import fetch_filtered
from blocks.site_counts.renderer import render

BLOCK_DIR = Path(__file__).resolve().parent


async def render_callback(attributes: Dict[str, Any], content: str, block: BlockInstance) -> str:
    """
    Counts per public content type, then the foo/baz listing, then markup.
    `content` is unused: the block has no inner blocks.
    """
    ctx = block.context
    content_types = await ctx.content.list_content_types(public=True)
    counts = await aggregate_counts(ctx.content, content_types)
    result = await fetch_filtered(ctx.content, ctx.post_id)
    return render(content_types, counts, result, ctx.post_id, attributes.get("className", ""))


def register(registry: BlockRegistry = block_registry) -> BlockType:
    return register_block_type_from_metadata(BLOCK_DIR, render_callback=render_callback, registry=registry)
