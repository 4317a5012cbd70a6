"""Paginated listing over a store's cursor-based list primitive.

Two modes are offered:

* ``list_page`` makes exactly one delimiter-scoped call, for browsing.
* ``list_all`` follows the cursor until the store reports the listing is no
  longer truncated, for aggregation. Pages are fetched one after another; a
  cursor is only meaningful for the request that follows it.
"""

from typing import AsyncIterator, Optional

from bucketfs.core import get_logger
from bucketfs.core.config import settings
from bucketfs.core.events import EventSink, LogLevel, default_sink
from bucketfs.core.exceptions import InvalidInput, ListingFailed
from bucketfs.core.observability import get_tracer
from bucketfs.objectstorage.models import KeySet, ObjectEntry, Page
from bucketfs.objectstorage.store import Lister
from bucketfs.path.keys import DELIMITER, validate_prefix

logger = get_logger(__name__)
tracer = get_tracer(__name__)

# Page size requested while listing exhaustively (the S3 maximum).
EXHAUSTIVE_PAGE_LIMIT = 1000


class PaginatedLister:
    """Lists objects under a prefix one page at a time or exhaustively."""

    def __init__(
        self,
        store: Lister,
        sink: Optional[EventSink] = None,
        page_limit: Optional[int] = None,
    ):
        """Initialize the lister.

        Args:
            store: Anything exposing the ``list`` primitive
            sink: Receives listing events; structlog when omitted
            page_limit: Objects per browsing page, defaults to settings
        """
        self.store = store
        self.sink = default_sink(sink)
        self.page_limit = page_limit or settings.browse_page_limit

    async def list_page(
        self,
        prefix: str,
        cursor: Optional[str] = None,
        delimiter: Optional[str] = DELIMITER,
        limit: Optional[int] = None,
    ) -> Page:
        """Fetch a single page.

        Raises:
            InvalidInput: If the prefix is malformed
            ListingFailed: If the store call fails
        """
        validate_prefix(prefix, allow_root=True)
        limit = limit or self.page_limit
        self.sink.emit(
            LogLevel.NETWORK,
            "Listing page",
            prefix=prefix,
            delimiter=delimiter,
            continued=cursor is not None,
        )
        try:
            return await self.store.list(prefix, cursor, delimiter, limit)
        except InvalidInput:
            raise
        except Exception as e:
            self.sink.emit(LogLevel.ERROR, "Listing failed", prefix=prefix, error=str(e))
            raise ListingFailed(prefix, 0, str(e)) from e

    async def iter_pages(
        self, prefix: str, delimiter: Optional[str] = None
    ) -> AsyncIterator[Page]:
        """Yield every page of a listing until it is no longer truncated.

        Raises:
            ListingFailed: If any store call fails, or the store reports a
                truncated page without a cursor to continue from
        """
        validate_prefix(prefix, allow_root=True)
        cursor: Optional[str] = None
        pages = 0

        while True:
            try:
                page = await self.store.list(
                    prefix, cursor, delimiter, EXHAUSTIVE_PAGE_LIMIT
                )
            except Exception as e:
                self.sink.emit(
                    LogLevel.ERROR,
                    "Exhaustive listing failed",
                    prefix=prefix,
                    pages_fetched=pages,
                    error=str(e),
                )
                raise ListingFailed(prefix, pages, str(e)) from e

            pages += 1
            self.sink.emit(
                LogLevel.DEBUG,
                "Page received",
                prefix=prefix,
                page=pages,
                objects=len(page.objects),
                truncated=page.truncated,
            )
            yield page

            if not page.truncated:
                return
            if not page.cursor:
                raise ListingFailed(
                    prefix, pages, "store reported a truncated page without a cursor"
                )
            cursor = page.cursor

    async def list_all(self, prefix: str) -> list[ObjectEntry]:
        """Every object under ``prefix``, one entry per key.

        When a key is reported more than once the first entry wins.
        """
        with tracer.start_as_current_span("bucketfs.list_all") as span:
            span.set_attribute("bucketfs.prefix", prefix)
            entries: dict[str, ObjectEntry] = {}
            pages = 0
            async for page in self.iter_pages(prefix):
                pages += 1
                for entry in page.objects:
                    entries.setdefault(entry.key, entry)

            span.set_attribute("bucketfs.pages", pages)
            span.set_attribute("bucketfs.objects", len(entries))
            logger.info(
                "Exhaustive listing completed",
                prefix=prefix,
                pages=pages,
                object_count=len(entries),
            )
            return list(entries.values())

    async def list_keys(self, prefix: str, into: Optional[KeySet] = None) -> KeySet:
        """Keys under ``prefix`` added to ``into`` (a new set when omitted)."""
        keys: KeySet = set() if into is None else into
        async for page in self.iter_pages(prefix):
            keys.update(entry.key for entry in page.objects)
        return keys
