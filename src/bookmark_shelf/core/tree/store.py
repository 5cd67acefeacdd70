"""In-memory store of collections and their documents."""

from collections.abc import Iterable

from loguru import logger

from bookmark_shelf.core.search.visibility import (
    apply_search,
    is_blank_term,
    propagate_to_collection,
    update_document_visibility,
)
from bookmark_shelf.ids import new_id, utc_now
from bookmark_shelf.models.node import Collection, Document, ItemCounts, NodeKind
from bookmark_shelf.protocols import ClockProtocol, IdFactoryProtocol


class TreeStore:
    """Collections of documents with search, selection and move operations.

    All operations are synchronous. Missing targets are reported through
    ``False``/``None`` return values, never exceptions, and every operation
    validates its targets before mutating anything.
    """

    def __init__(
        self,
        *,
        id_factory: IdFactoryProtocol = new_id,
        clock: ClockProtocol = utc_now,
    ) -> None:
        self._new_id = id_factory
        self._now = clock
        # Every id issued or attached, kept across removals and reset().
        self._known_ids: set[str] = set()
        self.collections: list[Collection] = []
        self.search_term = ""
        self.is_searching = False
        self.selected_collection_id: str | None = None
        self.selected_item_id: str | None = None

    # --- Aggregates ---

    @property
    def visible_collections(self) -> list[Collection]:
        return [col for col in self.collections if col.visible]

    @property
    def selected_collection(self) -> Collection | None:
        if self.selected_collection_id is None:
            return None
        return self.get_collection_by_id(self.selected_collection_id)

    @property
    def total_item_count(self) -> int:
        return sum(len(col.children) for col in self.collections)

    @property
    def visible_item_count(self) -> int:
        return sum(len(col.visible_children()) for col in self.collections)

    @property
    def all_item_counts(self) -> ItemCounts:
        return sum((col.item_counts() for col in self.collections), ItemCounts())

    # --- Lookups ---

    def get_collection_by_id(self, collection_id: str) -> Collection | None:
        return next((col for col in self.collections if col.id == collection_id), None)

    def get_item_by_id(self, item_id: str) -> Document | None:
        for collection in self.collections:
            item = collection.find_child(item_id)
            if item is not None:
                return item
        return None

    def find_item_owner(self, item_id: str) -> Collection | None:
        """Return the collection currently holding the item, if any."""
        for collection in self.collections:
            if collection.find_child(item_id) is not None:
                return collection
        return None

    def _issue_id(self) -> str:
        """Return a factory id not yet used by any entity of this store."""
        new = self._new_id()
        while new in self._known_ids:
            logger.debug("Skipping id {} already used in this store", new)
            new = self._new_id()
        self._known_ids.add(new)
        return new

    # --- Collections ---

    def create_collection(self, title: str) -> Collection:
        collection = Collection(id=self._issue_id(), passage=title, created_at=self._now())
        if self.search_term:
            propagate_to_collection(collection, self.search_term)
        self.collections.append(collection)
        logger.debug("Created collection {} ({!r})", collection.id, title)
        return collection

    def remove_collection(self, collection_id: str) -> bool:
        """Remove a collection together with all of its documents.

        Selection pointing at the collection or at one of its documents is cleared.
        """
        collection = self.get_collection_by_id(collection_id)
        if collection is None:
            return False

        child_ids = {child.id for child in collection.children}
        self.collections.remove(collection)

        if self.selected_collection_id == collection_id:
            self.selected_collection_id = None
            self.selected_item_id = None
        if self.selected_item_id in child_ids:
            self.selected_item_id = None

        logger.debug("Removed collection {} with {} documents", collection_id, len(child_ids))
        return True

    def select_collection(self, collection_id: str | None) -> None:
        """Select a collection (or none). Item selection is always reset."""
        if collection_id is not None and self.get_collection_by_id(collection_id) is None:
            logger.warning("Cannot select unknown collection {}", collection_id)
            collection_id = None
        self.selected_collection_id = collection_id
        self.selected_item_id = None

    # --- Items ---

    def add_document(
        self,
        collection_id: str,
        passage: str,
        tags: Iterable[str] = (),
    ) -> Document | None:
        """Create a document at the end of a collection.

        Returns:
            The new document, or None if the collection does not exist.
        """
        collection = self.get_collection_by_id(collection_id)
        if collection is None:
            return None

        doc = Document(
            id=self._issue_id(), passage=passage, created_at=self._now(), tags=list(tags)
        )
        self._attach(collection, doc)
        logger.debug("Added document {} to collection {}", doc.id, collection_id)
        return doc

    def add_item(self, collection_id: str, item: Document) -> bool:
        """Attach an existing leaf to a collection.

        Refused when the collection is unknown or the item's id has ever named
        a collection or document of this store.
        """
        collection = self.get_collection_by_id(collection_id)
        if collection is None:
            return False
        if item.kind is not NodeKind.DOCUMENT or item.id in self._known_ids:
            return False

        self._known_ids.add(item.id)
        self._attach(collection, item)
        logger.debug("Attached item {} to collection {}", item.id, collection_id)
        return True

    def _attach(self, collection: Collection, item: Document) -> None:
        collection.children.append(item)
        update_document_visibility(item, self.search_term)
        if self.search_term:
            propagate_to_collection(collection, self.search_term)

    def remove_item(self, collection_id: str, item_id: str) -> bool:
        """Remove a document from the given collection.

        Clears the item selection when it pointed at the removed document.
        """
        collection = self.get_collection_by_id(collection_id)
        if collection is None:
            return False
        if collection.detach_child(item_id) is None:
            return False

        if self.selected_item_id == item_id:
            self.selected_item_id = None
        if self.search_term:
            propagate_to_collection(collection, self.search_term)
        logger.debug("Removed document {} from collection {}", item_id, collection_id)
        return True

    def select_item(self, item_id: str | None) -> None:
        if item_id is not None and self.get_item_by_id(item_id) is None:
            logger.warning("Cannot select unknown item {}", item_id)
            item_id = None
        self.selected_item_id = item_id

    def move_item(self, item_id: str, from_collection_id: str, to_collection_id: str) -> bool:
        """Move a document between collections, appending it at the destination.

        The document keeps its id, passage, tags and visible flag.
        """
        source = self.get_collection_by_id(from_collection_id)
        destination = self.get_collection_by_id(to_collection_id)
        if source is None or destination is None:
            return False
        item = source.detach_child(item_id)
        if item is None:
            return False

        destination.children.append(item)

        if self.search_term:
            propagate_to_collection(source, self.search_term)
            propagate_to_collection(destination, self.search_term)
        logger.debug(
            "Moved document {} from {} to {}", item_id, from_collection_id, to_collection_id
        )
        return True

    # --- Search ---

    def search(self, term: str | None) -> None:
        """Filter the tree by a case-insensitive substring.

        An empty (or None) term shows every node again.
        """
        if term is None:
            term = ""
        if not isinstance(term, str):
            msg = f"Search term must be a string, got {type(term).__name__}"
            raise TypeError(msg)

        self.search_term = term
        self.is_searching = len(term) > 0
        visible = apply_search(self.collections, term)
        if not is_blank_term(term):
            logger.debug(
                "Search {!r}: {} of {} collections visible", term, visible, len(self.collections)
            )

    def clear_search(self) -> None:
        self.search("")

    def reset(self) -> None:
        """Drop every collection and clear search and selection state."""
        self.collections = []
        self.search_term = ""
        self.is_searching = False
        self.selected_collection_id = None
        self.selected_item_id = None

