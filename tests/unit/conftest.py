"""Shared test fixtures."""

import pytest

from bookmark_shelf.core.annotations.store import AnnotationStore
from bookmark_shelf.core.tree.store import TreeStore
from bookmark_shelf.models.node import CurrentUser
from tests.unit.fakes import FakeClock, FakeIdFactory


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> TreeStore:
    """Return an empty tree store with deterministic ids and time."""
    return TreeStore(id_factory=FakeIdFactory(), clock=clock)


@pytest.fixture
def shelf(store: TreeStore) -> TreeStore:
    """Return a store with two collections.

    News: "budget report", "Weather forecast"
    Tech: "pinia guide"
    """
    news = store.create_collection("News")
    tech = store.create_collection("Tech")
    store.add_document(news.id, "budget report", ["finance"])
    store.add_document(news.id, "Weather forecast", [])
    store.add_document(tech.id, "pinia guide", ["vue", "state"])
    return store


@pytest.fixture
def annotations(clock: FakeClock) -> AnnotationStore:
    return AnnotationStore(
        current_user=CurrentUser(nickname="Ada", epithet="Reviewer"),
        id_factory=FakeIdFactory(prefix="c"),
        clock=clock,
    )
