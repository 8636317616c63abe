from __future__ import annotations

from enum import IntEnum

from reactum.core.models.base import AppBaseModel


class NodeGroup(IntEnum):
    BOOK = 1
    NOTE = 2
    TAG = 3


class GraphNode(AppBaseModel):
    id: str
    group: NodeGroup
    label: str
    val: int


class GraphLink(AppBaseModel):
    source: str
    target: str
    value: int


class GraphData(AppBaseModel):
    """Nodes and links for the knowledge map; layout is left to the client."""

    nodes: list[GraphNode]
    links: list[GraphLink]
