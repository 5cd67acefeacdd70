"""CLI for bookmark-shelf (browse and search the sample shelf)."""

import json
from typing import Annotated, Any

import typer
from loguru import logger

from bookmark_shelf.core.annotations.store import AnnotationStore
from bookmark_shelf.core.tree.markdown import render_tree_as_markdown
from bookmark_shelf.core.tree.store import TreeStore
from bookmark_shelf.logging_config import configure_logging
from bookmark_shelf.models.node import Collection, Comment
from bookmark_shelf.samples import populate_sample_comments, populate_sample_tree

app = typer.Typer(help="Bookmark shelf: organize saved passages and find them again.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _sample_tree() -> TreeStore:
    store = TreeStore()
    populate_sample_tree(store)
    return store


def _collection_to_dict(collection: Collection, *, visible_only: bool) -> dict[str, Any]:
    return {
        "id": collection.id,
        "title": collection.title,
        "visible": collection.visible,
        "documents": [
            {
                "id": doc.id,
                "passage": doc.passage,
                "tags": doc.tags,
                "visible": doc.visible,
                "created_at": doc.created_at.isoformat(),
            }
            for doc in collection.children
            if doc.visible or not visible_only
        ],
    }


def _comment_to_dict(comment: Comment) -> dict[str, Any]:
    return {
        "id": comment.id,
        "nametag": comment.nametag,
        "content": comment.content,
        "created_at": comment.created_at.isoformat(),
        "updated_at": comment.updated_at.isoformat() if comment.updated_at else None,
    }


@app.command()
def tree(
    search_term: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Only show nodes matching this text"),
    ] = None,
    show_all: bool = typer.Option(False, "--all", "-a", help="Also show hidden nodes"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the shelf as a markdown outline."""
    store = _sample_tree()
    if search_term:
        store.search(search_term)

    if output_json:
        collections = store.collections if show_all else store.visible_collections
        data = {
            "search": store.search_term,
            "collections": [
                _collection_to_dict(col, visible_only=not show_all) for col in collections
            ],
        }
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    md = render_tree_as_markdown(store, visible_only=not show_all)
    if md:
        typer.echo(md, nl=False)
    else:
        typer.echo("Nothing to show.")


@app.command()
def search(
    term: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List documents matching a term, grouped by collection."""
    store = _sample_tree()
    store.search(term)

    if output_json:
        data = {
            "search": term,
            "visible": store.visible_item_count,
            "total": store.total_item_count,
            "collections": [
                _collection_to_dict(col, visible_only=True) for col in store.visible_collections
            ],
        }
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{store.visible_item_count} of {store.total_item_count} documents match:\n")
    for collection in store.visible_collections:
        matches = collection.visible_children()
        typer.echo(f"  [{collection.title}] {len(matches)} match(es)")
        for doc in matches:
            typer.echo(f"    {doc.passage[:80]}")
            typer.echo(f"      id={doc.id}  tags={', '.join(doc.tags) or '-'}")
        typer.echo()


@app.command()
def counts(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show item counts across the shelf."""
    store = _sample_tree()
    item_counts = store.all_item_counts

    if output_json:
        data = {
            "collections": len(store.collections),
            "documents": item_counts.documents,
            "total": item_counts.total,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{len(store.collections)} collections:\n")
    for collection in store.collections:
        typer.echo(f"  {collection.title} - {len(collection.children)} documents")
    typer.echo(f"\n{item_counts.total} items ({item_counts.documents} documents)")


@app.command()
def comments(
    url: str = typer.Argument(..., help="URL whose comments to show"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the comments attached to a URL."""
    store = AnnotationStore()
    populate_sample_comments(store)

    thread = store.get_comments(url)
    if not thread:
        logger.error("No comments for {}. Known URLs: {}", url, ", ".join(store.urls))
        raise typer.Exit(1)

    if output_json:
        data = {"url": url, "count": len(thread), "comments": [_comment_to_dict(c) for c in thread]}
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{len(thread)} comments on {url}:\n")
    for comment in thread:
        typer.echo(f"  {comment.nametag}  ({comment.created_at:%Y-%m-%d %H:%M})")
        for line in comment.content.split("\n"):
            typer.echo(f"    {line}")
        typer.echo()
