from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from blocks.errors import BlockAlreadyRegisteredError, RegistryLockedError, UnknownBlockError
from blocks.metadata import BlockAttribute, BlockMetadata, load_block_metadata
from content.services.content_service import ContentService

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Dict[str, Any], str, "BlockInstance"], Awaitable[str]]

# JSON schema type -> accepted python types (bool is not a number here)
_ATTRIBUTE_TYPES = {
    "string": (str,),
    "boolean": (bool,),
    "number": (int, float),
    "integer": (int,),
    "array": (list,),
    "object": (dict,),
    "null": (type(None),),
}


def _matches(attribute: BlockAttribute, value: Any) -> bool:
    if isinstance(value, bool) and attribute.type in ("number", "integer"):
        return False
    return isinstance(value, _ATTRIBUTE_TYPES[attribute.type])


@dataclass(frozen=True)
class BlockContext:
    """What the host knows about the place a block is rendered in."""

    content: ContentService
    post_id: Optional[int] = None


@dataclass(frozen=True)
class BlockType:
    metadata: BlockMetadata
    render_callback: RenderCallback

    @property
    def name(self) -> str:
        return self.metadata.name

    def prepare_attributes(self, attributes: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Declared attributes that are missing or of the wrong type take their
        declared default (or are dropped when there is none). Undeclared
        attributes pass through untouched.
        """
        prepared = dict(attributes or {})
        for key, spec in self.metadata.attributes.items():
            if key in prepared and _matches(spec, prepared[key]):
                continue
            prepared.pop(key, None)
            if spec.default is not None:
                prepared[key] = spec.default
        return prepared


@dataclass(frozen=True)
class BlockInstance:
    block_type: BlockType
    attributes: Dict[str, Any]
    context: BlockContext


@dataclass
class BlockRegistry:
    """
    Process-wide map of block name -> BlockType.

    Populated at startup, then locked; after `lock()` it is read-only until
    `clear()` (shutdown, test teardown).
    """

    _blocks: Dict[str, BlockType] = field(default_factory=dict)
    _locked: bool = False

    @property
    def locked(self) -> bool:
        return self._locked

    def register(self, block_type: BlockType) -> BlockType:
        if self._locked:
            raise RegistryLockedError(block_type.name)
        if block_type.name in self._blocks:
            raise BlockAlreadyRegisteredError(block_type.name)
        self._blocks[block_type.name] = block_type
        logger.info("registered block type %s", block_type.name)
        return block_type

    def get(self, name: str) -> BlockType:
        try:
            return self._blocks[name]
        except KeyError:
            raise UnknownBlockError(name) from None

    def is_registered(self, name: str) -> bool:
        return name in self._blocks

    def all(self) -> List[BlockType]:
        return list(self._blocks.values())

    def lock(self) -> None:
        self._locked = True

    def clear(self) -> None:
        self._blocks.clear()
        self._locked = False
        logger.info("block registry cleared")

    async def render(
        self,
        name: str,
        attributes: Optional[Mapping[str, Any]],
        content: str,
        context: BlockContext,
    ) -> str:
        block_type = self.get(name)
        prepared = block_type.prepare_attributes(attributes)
        logger.debug("rendering %s for post %s", name, context.post_id)
        return await block_type.render_callback(
            prepared,
            content,
            BlockInstance(block_type=block_type, attributes=prepared, context=context),
        )


block_registry = BlockRegistry()


def register_block_type_from_metadata(
    path: Path | str,
    *,
    render_callback: RenderCallback,
    registry: BlockRegistry = block_registry,
) -> BlockType:
    """Register a server-rendered block whose configuration lives in `block.json` under `path`."""
    metadata = load_block_metadata(path)
    return registry.register(BlockType(metadata=metadata, render_callback=render_callback))
