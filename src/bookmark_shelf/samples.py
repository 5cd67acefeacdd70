"""Sample collections and comments for demos and the CLI."""

from datetime import UTC, datetime

from bookmark_shelf.core.annotations.store import AnnotationStore
from bookmark_shelf.core.tree.store import TreeStore

SAMPLE_TREE: dict[str, list[tuple[str, list[str]]]] = {
    "News": [
        (
            "Vue 3.4 has been released with major performance improvements.",
            ["vue", "frontend", "news"],
        ),
        ("An introduction to the new features of TypeScript 5.0.", ["typescript", "programming"]),
        ("React 19 beta is out", ["react", "frontend", "news"]),
    ],
    "Tech Docs": [
        (
            "The Composite pattern is a design pattern for tree structures.",
            ["design-pattern", "programming"],
        ),
        ("Pinia is the state management library for Vue 3.", ["vue", "state-management"]),
        ("Clean Code principles and how to practice them", ["best-practice", "programming"]),
    ],
    "Project Docs": [
        ("API design document v2.0", ["api", "backend"]),
        ("Frontend component guidelines", ["frontend", "guide"]),
        ("Database schema design", ["database", "backend"]),
    ],
}

# (nametag, content, created_at) per URL.
SAMPLE_COMMENTS: dict[str, list[tuple[str, str, datetime]]] = {
    "http://localhost:5173/": [
        (
            "Developer A • Frontend",
            "The UI on this page is really clean! Looks like the Composition API, "
            "and the code structure is impressive.",
            datetime(2025, 10, 15, 10, 30, tzinfo=UTC),
        ),
        (
            "Designer B • UX/UI",
            "I like the color palette, especially the grey levels.\n\n"
            "**Suggestions:**\n- Clearer button hover effect\n- Consider mobile layouts",
            datetime(2025, 10, 16, 14, 20, tzinfo=UTC),
        ),
        (
            "Developer C • Backend",
            "# About the API\n\nUse these endpoints for comments:\n\n"
            "```\nPOST /api/comments\nGET /api/comments/:documentId\n"
            "DELETE /api/comments/:commentId\n```",
            datetime(2025, 10, 17, 9, 15, tzinfo=UTC),
        ),
    ],
    "https://www.naver.com/": [
        (
            "User D • General",
            "The portal front page is always full of information. The news section is handy.",
            datetime(2025, 10, 16, 8, 0, tzinfo=UTC),
        ),
        (
            "Marketer E • Digital marketing",
            "The search ranking seems to have changed recently. Time to revisit our SEO plan.",
            datetime(2025, 10, 17, 11, 45, tzinfo=UTC),
        ),
    ],
    "https://www.google.com/": [
        (
            "Researcher F • AI/ML",
            "## Highlights\n1. Multimodal input\n2. Long context\n3. Fast responses",
            datetime(2025, 10, 15, 16, 30, tzinfo=UTC),
        ),
        (
            "Developer G • Full stack",
            "The free tier is enough to deploy small projects.",
            datetime(2025, 10, 16, 13, 20, tzinfo=UTC),
        ),
        (
            "Student H • Computer science",
            "Search tips:\n\n- `site:` to search one site\n- `filetype:pdf` for PDFs only\n"
            "- quotes for exact phrases",
            datetime(2025, 10, 18, 7, 0, tzinfo=UTC),
        ),
    ],
}


def populate_sample_tree(store: TreeStore) -> None:
    """Add the sample collections and documents to a store."""
    for title, documents in SAMPLE_TREE.items():
        collection = store.create_collection(title)
        for passage, tags in documents:
            store.add_document(collection.id, passage, tags)


def populate_sample_comments(store: AnnotationStore) -> None:
    """Add the sample comments to a store, keeping their authors and dates."""
    for url, entries in SAMPLE_COMMENTS.items():
        for nametag, content, created_at in entries:
            store.import_comment(url, nametag=nametag, content=content, created_at=created_at)
