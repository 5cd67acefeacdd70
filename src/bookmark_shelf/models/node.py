"""Domain models for the bookmark shelf."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class NodeKind(StrEnum):
    """Tag distinguishing the composite from its leaves."""

    COLLECTION = "collection"
    DOCUMENT = "document"


@dataclass
class Document:
    """A saved passage, owned by exactly one collection."""

    id: str
    passage: str
    created_at: datetime
    tags: list[str] = field(default_factory=list)
    visible: bool = True
    kind: NodeKind = field(default=NodeKind.DOCUMENT, init=False)


@dataclass(frozen=True)
class ItemCounts:
    """Item totals, broken down by leaf kind."""

    documents: int = 0
    total: int = 0

    def __add__(self, other: "ItemCounts") -> "ItemCounts":
        return ItemCounts(
            documents=self.documents + other.documents,
            total=self.total + other.total,
        )


@dataclass
class Collection:
    """A named container owning an ordered sequence of documents."""

    id: str
    passage: str
    created_at: datetime
    visible: bool = True
    children: list[Document] = field(default_factory=list)
    kind: NodeKind = field(default=NodeKind.COLLECTION, init=False)

    @property
    def title(self) -> str:
        return self.passage

    def visible_children(self) -> list[Document]:
        return [child for child in self.children if child.visible]

    def find_child(self, item_id: str) -> Document | None:
        return next((child for child in self.children if child.id == item_id), None)

    def detach_child(self, item_id: str) -> Document | None:
        """Remove a child by id and return it, or None if it is not here."""
        for index, child in enumerate(self.children):
            if child.id == item_id:
                return self.children.pop(index)
        return None

    def item_counts(self) -> ItemCounts:
        documents = sum(1 for child in self.children if child.kind is NodeKind.DOCUMENT)
        return ItemCounts(documents=documents, total=len(self.children))


@dataclass
class Comment:
    """A comment attached to a URL."""

    id: str
    nametag: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CurrentUser:
    """The author stamped on newly added comments."""

    nickname: str
    epithet: str
