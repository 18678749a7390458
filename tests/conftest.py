from __future__ import annotations

import pytest

from labelgraph.models import Graph
from labelgraph.samples import build_directed_sample, build_undirected_sample


@pytest.fixture
def directed_graph() -> Graph:
    return build_directed_sample()


@pytest.fixture
def undirected_graph() -> Graph:
    return build_undirected_sample()
