from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

METADATA_FILE = "block.json"

AttributeType = Literal["string", "boolean", "number", "integer", "array", "object", "null"]


class BlockAttribute(BaseModel):
    type: AttributeType
    default: Any = None


class BlockMetadata(BaseModel):
    """
    Declared configuration of a block type, read from its `block.json`.
    Only the keys the server side needs are modelled; the rest are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    api_version: int = Field(default=2, alias="apiVersion")
    name: str = Field(pattern=r"^[a-z0-9-]+/[a-z0-9-]+$")
    title: str
    category: str = "widgets"
    description: Optional[str] = None
    textdomain: Optional[str] = None
    attributes: Dict[str, BlockAttribute] = {}


def load_block_metadata(path: Path | str) -> BlockMetadata:
    """Read a block descriptor from `path` (the JSON file or the directory holding it)."""
    path = Path(path)
    if path.is_dir():
        path = path / METADATA_FILE
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)
    return BlockMetadata.model_validate(raw)
