"""Render the collection tree as markdown."""

import io

from bookmark_shelf.core.tree.store import TreeStore
from bookmark_shelf.models.node import Document

HIDDEN_MARKER = " (hidden)"


def _write_document(out: io.StringIO, doc: Document, *, include_tags: bool, hidden: bool) -> None:
    indent = "    "
    lines = doc.passage.split("\n")
    first = lines[0]
    if include_tags and doc.tags:
        first += " " + " ".join(f"#{tag}" for tag in doc.tags)
    if hidden:
        first += HIDDEN_MARKER
    out.write(f"{indent}- {first}\n")
    for line in lines[1:]:
        out.write(f"{indent}  {line}\n")


def render_tree_as_markdown(
    store: TreeStore,
    *,
    visible_only: bool = True,
    include_tags: bool = True,
) -> str:
    """Render collections and their documents as an indented bullet list.

    Args:
        store: The store to render.
        visible_only: Skip nodes hidden by the active search. When False,
            hidden nodes are rendered with a "(hidden)" marker.
        include_tags: Append document tags as ``#tag``.

    Returns:
        Markdown string, empty when nothing is rendered.
    """
    out = io.StringIO()
    for collection in store.collections:
        if visible_only and not collection.visible:
            continue

        title = collection.title
        if not collection.visible:
            title += HIDDEN_MARKER
        out.write(f"- {title}\n")

        for doc in collection.children:
            if visible_only and not doc.visible:
                continue
            _write_document(out, doc, include_tags=include_tags, hidden=not doc.visible)

    return out.getvalue()
