"""Tests for markdown rendering of the collection tree."""

from bookmark_shelf.core.tree.markdown import render_tree_as_markdown
from bookmark_shelf.core.tree.store import TreeStore


def test_render_full_tree(shelf: TreeStore) -> None:
    md = render_tree_as_markdown(shelf)
    assert md == (
        "- News\n"
        "    - budget report #finance\n"
        "    - Weather forecast\n"
        "- Tech\n"
        "    - pinia guide #vue #state\n"
    )


def test_render_without_tags(shelf: TreeStore) -> None:
    md = render_tree_as_markdown(shelf, include_tags=False)
    assert "#" not in md


def test_render_skips_hidden_nodes(shelf: TreeStore) -> None:
    shelf.search("budget")
    md = render_tree_as_markdown(shelf)
    assert md == "- News\n    - budget report #finance\n"


def test_render_all_marks_hidden_nodes(shelf: TreeStore) -> None:
    shelf.search("budget")
    md = render_tree_as_markdown(shelf, visible_only=False)
    assert "    - Weather forecast (hidden)\n" in md
    assert "- Tech (hidden)\n" in md
    assert "- News\n" in md


def test_render_multiline_passage(store: TreeStore) -> None:
    col = store.create_collection("Notes")
    store.add_document(col.id, "first line\nsecond line", ["a"])
    md = render_tree_as_markdown(store)
    assert md == "- Notes\n    - first line #a\n      second line\n"


def test_render_empty_results(shelf: TreeStore) -> None:
    shelf.search("nothing matches this")
    assert render_tree_as_markdown(shelf) == ""
