"""Edge model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Edge(BaseModel):
    """Directed, labeled, weighted arc owned by its source vertex."""

    model_config = ConfigDict(strict=True, extra="ignore", ser_json_inf_nan="constants")

    to: str
    relationship: str
    weight: float
