from __future__ import annotations

from typing import TYPE_CHECKING

from reactum.core.schemas.graph import GraphData, GraphLink, GraphNode, NodeGroup

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reactum.core.models.note import Note

BOOK_NODE_SIZE = 20
NOTE_NODE_SIZE = 10
TAG_NODE_SIZE = 8
BOOK_LINK_WEIGHT = 3
TAG_LINK_WEIGHT = 1
NOTE_LABEL_CHARS = 10


def tag_node_id(tag: str) -> str:
    return f"tag-{tag}"


def note_label(content: str) -> str:
    return content[:NOTE_LABEL_CHARS] + "..."


def build_knowledge_graph(notes: Sequence[Note]) -> GraphData:
    """Build the book -> note -> tag relationship graph.

    Books and tags are deduplicated by name in order of first appearance.
    Each note links to its book once and to each distinct tag it carries once.
    """
    nodes: list[GraphNode] = []
    links: list[GraphLink] = []

    books = list(dict.fromkeys(note.book_title for note in notes))
    tags = list(dict.fromkeys(tag for note in notes for tag in note.tags))

    for book in books:
        nodes.append(GraphNode(id=book, group=NodeGroup.BOOK, label=book, val=BOOK_NODE_SIZE))

    for note in notes:
        nodes.append(
            GraphNode(id=note.id, group=NodeGroup.NOTE, label=note_label(note.content), val=NOTE_NODE_SIZE)
        )
        links.append(GraphLink(source=note.book_title, target=note.id, value=BOOK_LINK_WEIGHT))

    for tag in tags:
        nodes.append(GraphNode(id=tag_node_id(tag), group=NodeGroup.TAG, label=f"#{tag}", val=TAG_NODE_SIZE))
        for note in notes:
            if tag in note.tags:
                links.append(GraphLink(source=note.id, target=tag_node_id(tag), value=TAG_LINK_WEIGHT))

    return GraphData(nodes=nodes, links=links)
