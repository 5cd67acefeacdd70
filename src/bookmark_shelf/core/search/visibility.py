"""Visibility propagation for incremental substring search.

A document is visible when its passage contains the search term, compared
case-insensitively. A collection is visible when its own label matches or when
at least one of its documents is visible. An empty term (or one made only of
whitespace) shows everything.
"""

from collections.abc import Iterable

from bookmark_shelf.models.node import Collection, Document


def is_blank_term(term: str | None) -> bool:
    """Return True when the term should not filter anything."""
    return term is None or not term.strip()


def passage_matches(passage: str, term: str) -> bool:
    """Case-insensitive substring test. No tokenization, no fuzziness."""
    return term.casefold() in passage.casefold()


def update_document_visibility(document: Document, term: str | None = None) -> bool:
    """Recompute and return a document's visible flag."""
    if is_blank_term(term):
        document.visible = True
    else:
        document.visible = passage_matches(document.passage, term)
    return document.visible


def propagate_to_collection(collection: Collection, term: str | None = None) -> bool:
    """Derive a collection's flag from its label and its children's cached flags.

    Children are not re-evaluated.
    """
    if is_blank_term(term):
        collection.visible = True
    else:
        self_matches = passage_matches(collection.passage, term)
        collection.visible = self_matches or any(child.visible for child in collection.children)
    return collection.visible


def update_collection_visibility(collection: Collection, term: str | None = None) -> bool:
    """Evaluate every child against the term, then the collection itself.

    Returns the collection's new visible flag.
    """
    # Every child is re-evaluated, including those after the first match.
    for child in collection.children:
        update_document_visibility(child, term)
    return propagate_to_collection(collection, term)


def apply_search(collections: Iterable[Collection], term: str | None = None) -> int:
    """Run the visibility pass over every collection.

    Returns:
        Number of collections left visible.
    """
    return sum(1 for collection in collections if update_collection_visibility(collection, term))
