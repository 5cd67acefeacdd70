"""Collections of saved passages with incremental search and per-URL comments."""

from bookmark_shelf.core.annotations.store import AnnotationStore
from bookmark_shelf.core.tree.store import TreeStore
from bookmark_shelf.models.node import (
    Collection,
    Comment,
    CurrentUser,
    Document,
    ItemCounts,
    NodeKind,
)

__all__ = [
    "AnnotationStore",
    "Collection",
    "Comment",
    "CurrentUser",
    "Document",
    "ItemCounts",
    "NodeKind",
    "TreeStore",
]
