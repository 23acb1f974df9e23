from typing import List

from blocks.registry import BlockRegistry, BlockType, block_registry


def register_blocks(registry: BlockRegistry = block_registry) -> List[BlockType]:
    """Register every server-rendered block this service ships."""
    from blocks import site_counts

    return [site_counts.register(registry)]
