"""Tests for explorer view state and event handling."""
import asyncio

import pytest

from booksearch.models import DetailView, ListView, SearchType
from booksearch.search import SearchOrchestrator
from booksearch.state import BookExplorer
from conftest import FakeAsyncClient, make_item


def make_explorer(renderer, response):
    client = FakeAsyncClient(response)
    return BookExplorer(SearchOrchestrator(client), renderer), client


SAMPLE = {
    "items": [
        make_item("High", rating=4.5, is_ebook=True),
        make_item("Unrated"),
        make_item("Low", rating=3.0, is_ebook=True),
    ]
}


def titles(records):
    return [b.title for b in records]


def test_initial_state(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)

    assert explorer.working_set == ()
    assert explorer.view == ListView()
    assert explorer.selected is None


def test_search_renders_list(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)

    assert asyncio.run(explorer.handle_search("books", SearchType.TITLE))

    assert titles(explorer.working_set) == ["High", "Unrated", "Low"]
    assert isinstance(explorer.view, ListView)
    assert renderer.calls == [("list", explorer.working_set)]


def test_search_with_no_matches_renders_empty_list(renderer):
    """Test that a search for "Dune" with zero matches shows an empty list."""
    explorer, _ = make_explorer(renderer, {"kind": "books#volumes", "totalItems": 0})

    assert asyncio.run(explorer.handle_search("Dune", SearchType.TITLE))

    assert explorer.working_set == ()
    assert explorer.view == ListView(())
    assert renderer.calls == [("list", ())]


def test_blank_search_leaves_state_unchanged(renderer):
    explorer, client = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))
    explorer.handle_select_index(1)
    working_set, view, calls = explorer.working_set, explorer.view, list(renderer.calls)

    assert not asyncio.run(explorer.handle_search("   ", SearchType.TITLE))

    assert explorer.working_set == working_set
    assert explorer.view == view
    assert renderer.calls == calls
    assert len(client.queries) == 1


def test_select_shows_detail(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))

    record = explorer.handle_select_index(3)

    assert record.title == "Low"
    assert explorer.view == DetailView(record)
    assert explorer.selected is record
    assert renderer.calls[-1] == ("detail", record)


def test_select_out_of_range(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))

    with pytest.raises(IndexError):
        explorer.handle_select_index(4)
    with pytest.raises(IndexError):
        explorer.handle_select_index(0)
    assert isinstance(explorer.view, ListView)


def test_render_list_after_select_returns_to_list_view(renderer):
    """Test that no stale detail view survives a list render."""
    explorer, _ = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))
    explorer.handle_select(explorer.working_set[0])

    explorer.handle_filter(False)

    assert isinstance(explorer.view, ListView)
    assert explorer.selected is None


def test_render_operations_are_idempotent(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))
    record = explorer.working_set[0]

    explorer.render_detail(record)
    first = explorer.view
    explorer.render_detail(record)
    assert explorer.view == first

    explorer.render_list(explorer.working_set)
    first = explorer.view
    explorer.render_list(explorer.working_set)
    assert explorer.view == first


def test_sort_then_filter_then_unfilter(renderer):
    """Test that unfiltering recovers the full sorted list without a request."""
    explorer, client = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))

    explorer.handle_sort()
    assert titles(explorer.displayed) == ["High", "Low", "Unrated"]

    explorer.handle_filter(True)
    assert titles(explorer.displayed) == ["High", "Low"]

    explorer.handle_filter(False)
    assert titles(explorer.displayed) == ["High", "Low", "Unrated"]

    assert titles(explorer.working_set) == ["High", "Unrated", "Low"]
    assert len(client.queries) == 1


def test_new_search_keeps_filter_and_drops_sort(renderer):
    explorer, client = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))
    explorer.handle_sort()
    explorer.handle_filter(True)

    client.response = {
        "items": [
            make_item("Paper"),
            make_item("Three", rating=3.0, is_ebook=True),
            make_item("Five", rating=5.0, is_ebook=True),
        ]
    }
    asyncio.run(explorer.handle_search("more", SearchType.AUTHOR))

    assert titles(explorer.displayed) == ["Three", "Five"]
    assert not explorer.sorted_by_rating
    assert explorer.ebook_only


def test_select_index_uses_displayed_list(renderer):
    explorer, _ = make_explorer(renderer, SAMPLE)
    asyncio.run(explorer.handle_search("books", SearchType.TITLE))
    explorer.handle_sort()

    assert explorer.handle_select_index(2).title == "Low"
    # Still resolves against the list the user last saw
    assert explorer.handle_select_index(3).title == "Unrated"
