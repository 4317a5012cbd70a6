"""Tests for paginated listing."""

import pytest

from bucketfs.core.exceptions import InvalidInput, ListingFailed
from bucketfs.core.events import LogLevel
from bucketfs.objectstorage.listing.pager import EXHAUSTIVE_PAGE_LIMIT, PaginatedLister
from fakes import ScriptedStore, make_page


def _keys(prefix, start, count):
    return [f"{prefix}{i:04d}" for i in range(start, start + count)]


class TestExhaustiveListing:
    """Test listing every page of a prefix."""

    @pytest.mark.asyncio
    async def test_three_pages(self):
        """Three pages of 100 keys give 300 keys from exactly 3 calls."""
        store = ScriptedStore(
            [
                make_page(_keys("x/", 0, 100), cursor="c1", truncated=True),
                make_page(_keys("x/", 100, 100), cursor="c2", truncated=True),
                make_page(_keys("x/", 200, 100)),
            ]
        )

        entries = await PaginatedLister(store).list_all("x/")

        assert len(entries) == 300
        assert len(store.calls) == 3

    @pytest.mark.asyncio
    async def test_cursor_passed_verbatim(self):
        """Each call carries the cursor returned by the previous page."""
        store = ScriptedStore(
            [
                make_page(["x/a"], cursor="opaque==/1", truncated=True),
                make_page(["x/b"], cursor="opaque==/2", truncated=True),
                make_page(["x/c"]),
            ]
        )

        await PaginatedLister(store).list_all("x/")

        assert [call["cursor"] for call in store.calls] == [
            None,
            "opaque==/1",
            "opaque==/2",
        ]
        assert all(call["delimiter"] is None for call in store.calls)
        assert all(call["limit"] == EXHAUSTIVE_PAGE_LIMIT for call in store.calls)

    @pytest.mark.asyncio
    async def test_empty_truncated_page_continues(self):
        """An empty page that is still truncated does not end the listing."""
        store = ScriptedStore(
            [
                make_page(["x/a"], cursor="c1", truncated=True),
                make_page([], cursor="c2", truncated=True),
                make_page(["x/b"]),
            ]
        )

        entries = await PaginatedLister(store).list_all("x/")

        assert sorted(entry.key for entry in entries) == ["x/a", "x/b"]
        assert len(store.calls) == 3

    @pytest.mark.asyncio
    async def test_duplicate_keys_listed_once(self):
        """A key seen on several pages appears once in the result."""
        store = ScriptedStore(
            [
                make_page(["x/a", "x/b"], cursor="c1", truncated=True),
                make_page(["x/b", "x/c", "x/a"]),
            ]
        )

        entries = await PaginatedLister(store).list_all("x/")
        keys = await PaginatedLister(
            ScriptedStore(
                [
                    make_page(["x/a", "x/b"], cursor="c1", truncated=True),
                    make_page(["x/b", "x/c", "x/a"]),
                ]
            )
        ).list_keys("x/")

        assert [entry.key for entry in entries] == ["x/a", "x/b", "x/c"]
        assert keys == {"x/a", "x/b", "x/c"}

    @pytest.mark.asyncio
    async def test_store_error_aborts_listing(self, sink):
        """A failing page aborts the listing with the prefix and progress."""
        store = ScriptedStore(
            [
                make_page(["x/a"], cursor="c1", truncated=True),
                make_page(["x/b"], cursor="c2", truncated=True),
            ],
            error_on_call=1,
        )

        with pytest.raises(ListingFailed) as exc_info:
            await PaginatedLister(store, sink=sink).list_all("x/")

        assert exc_info.value.prefix == "x/"
        assert exc_info.value.pages_fetched == 1
        assert any(entry.level is LogLevel.ERROR for entry in sink.entries)

    @pytest.mark.asyncio
    async def test_truncated_page_without_cursor(self):
        """A truncated page with no cursor cannot be continued."""
        store = ScriptedStore([make_page(["x/a"], cursor=None, truncated=True)])

        with pytest.raises(ListingFailed, match="without a cursor"):
            await PaginatedLister(store).list_all("x/")

    @pytest.mark.asyncio
    async def test_invalid_prefix_rejected_before_listing(self):
        """A malformed prefix never reaches the store."""
        store = ScriptedStore([])

        with pytest.raises(InvalidInput):
            await PaginatedLister(store).list_all("/x/")

        assert store.calls == []


class TestSinglePage:
    """Test fetching one browsing page."""

    @pytest.mark.asyncio
    async def test_defaults(self):
        """Browsing pages are delimiter-scoped with the configured limit."""
        store = ScriptedStore(
            [make_page(["x/a"], cursor="c1", truncated=True, prefixes=["x/sub/"])]
        )

        page = await PaginatedLister(store, page_limit=100).list_page("x/")

        assert store.calls == [
            {"prefix": "x/", "cursor": None, "delimiter": "/", "limit": 100}
        ]
        assert page.delimited_prefixes == ("x/sub/",)
        assert page.cursor == "c1"

    @pytest.mark.asyncio
    async def test_error_wrapped(self):
        """Store failures surface as ListingFailed."""
        store = ScriptedStore([], error_on_call=0)

        with pytest.raises(ListingFailed):
            await PaginatedLister(store).list_page("x/")
