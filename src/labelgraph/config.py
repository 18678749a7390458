"""Configuration for graph persistence."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PersistenceConfig(BaseModel):
    """Validated settings for saving and loading graphs. Passed explicitly to I/O calls."""

    model_config = ConfigDict(frozen=True)

    indent: int | None = 2
    encoding: str = "utf-8"
