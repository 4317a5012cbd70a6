"""Chunked deletion of arbitrarily large key sets.

Stores cap the number of keys per delete call, so the merged key set is sent
in fixed-size chunks. Chunks are applied in order and independently: a failed
chunk stops the run, and the chunks before it stay deleted.
"""

from typing import Iterable, Iterator, Optional, Sequence

from bucketfs.core import get_logger
from bucketfs.core.config import settings
from bucketfs.core.events import EventSink, LogLevel, default_sink
from bucketfs.core.exceptions import DeletePartial, InvalidInput
from bucketfs.core.observability import get_tracer
from bucketfs.objectstorage.listing.pager import PaginatedLister
from bucketfs.objectstorage.listing.resolver import PrefixResolver
from bucketfs.objectstorage.models import DeleteResult, KeySet
from bucketfs.objectstorage.store import MAX_DELETE_KEYS, StoreHandle
from bucketfs.path.keys import DELIMITER, split_key, validate_key, validate_prefix

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def chunked(items: Sequence[str], size: int) -> Iterator[list[str]]:
    """Split ``items`` into consecutive lists of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


class BulkDeleter:
    """Deletes explicit keys plus everything under selected folders."""

    def __init__(
        self,
        store: StoreHandle,
        chunk_size: Optional[int] = None,
        sink: Optional[EventSink] = None,
    ):
        """Initialize the deleter.

        Args:
            store: Store to delete from
            chunk_size: Keys per delete call, at most 1000
            sink: Receives deletion events; structlog when omitted

        Raises:
            InvalidInput: If chunk_size is outside 1..1000
        """
        chunk_size = chunk_size or settings.delete_chunk_size
        if not 0 < chunk_size <= MAX_DELETE_KEYS:
            raise InvalidInput(
                f"chunk_size must be between 1 and {MAX_DELETE_KEYS}, got {chunk_size}"
            )
        self.store = store
        self.chunk_size = chunk_size
        self.sink = default_sink(sink)

    async def collect(
        self, keys: Iterable[str] = (), prefixes: Iterable[str] = ()
    ) -> KeySet:
        """Merge the existing ``keys`` with every key under ``prefixes``.

        Explicit keys the store no longer holds are dropped, so deleted
        counts only cover objects that were actually present.

        Raises:
            InvalidInput: If a key or prefix is malformed (before any listing)
            ListingFailed: If the store cannot be listed
        """
        key_set: KeySet = {validate_key(key) for key in keys}
        prefixes = [validate_prefix(prefix) for prefix in prefixes]
        if key_set:
            key_set = await self.existing(key_set)
        if prefixes:
            key_set |= await PrefixResolver(self.store, sink=self.sink).resolve(prefixes)
        return key_set

    async def existing(self, keys: KeySet) -> KeySet:
        """The subset of ``keys`` currently in the store.

        Each distinct parent folder is listed one level deep.
        """
        parents: dict[str, set[str]] = {}
        for key in keys:
            parents.setdefault(split_key(key)[0], set()).add(key)

        lister = PaginatedLister(self.store, sink=self.sink)
        found: KeySet = set()
        for parent in sorted(parents):
            wanted = parents[parent]
            async for page in lister.iter_pages(parent, delimiter=DELIMITER):
                found.update(e.key for e in page.objects if e.key in wanted)

        if len(found) < len(keys):
            logger.info("Skipping missing keys", missing_count=len(keys) - len(found))
        return found

    async def delete(
        self, keys: Iterable[str] = (), prefixes: Iterable[str] = ()
    ) -> DeleteResult:
        """Delete ``keys`` and every object under ``prefixes``.

        Keys that no longer exist are skipped and folders that are already
        empty contribute no keys, so a repeated run succeeds with zero.

        Returns:
            DeleteResult whose deleted_count is the number of existing keys removed

        Raises:
            InvalidInput: If a key or prefix is malformed (nothing is deleted)
            ListingFailed: If expanding a prefix fails (nothing is deleted)
            DeletePartial: If a chunk fails; earlier chunks were applied
        """
        key_set = await self.collect(keys, prefixes)
        ordered = sorted(key_set)
        requested = len(ordered)

        if not ordered:
            logger.info("Nothing to delete")
            return DeleteResult(requested=0, deleted_count=0, chunk_count=0)

        deleted = 0
        chunk_index = 0
        with tracer.start_as_current_span("bucketfs.bulk_delete") as span:
            span.set_attribute("bucketfs.requested", requested)
            for chunk_index, chunk in enumerate(chunked(ordered, self.chunk_size)):
                try:
                    await self.store.delete(chunk)
                except Exception as e:
                    self.sink.emit(
                        LogLevel.ERROR,
                        "Delete chunk failed",
                        chunk=chunk_index,
                        deleted_count=deleted,
                        requested=requested,
                        error=str(e),
                    )
                    span.set_attribute("bucketfs.deleted", deleted)
                    raise DeletePartial(deleted, chunk_index, requested) from e

                deleted += len(chunk)
                self.sink.emit(
                    LogLevel.NETWORK,
                    "Delete chunk applied",
                    chunk=chunk_index,
                    size=len(chunk),
                    deleted_count=deleted,
                )
            span.set_attribute("bucketfs.deleted", deleted)

        logger.info(
            "Bulk delete completed", deleted_count=deleted, chunk_count=chunk_index + 1
        )
        return DeleteResult(
            requested=requested, deleted_count=deleted, chunk_count=chunk_index + 1
        )


async def delete_objects(
    store: StoreHandle,
    keys: Iterable[str] = (),
    prefixes: Iterable[str] = (),
    chunk_size: Optional[int] = None,
    sink: Optional[EventSink] = None,
) -> DeleteResult:
    """Convenience function to delete keys and folders in chunks."""
    return await BulkDeleter(store, chunk_size=chunk_size, sink=sink).delete(
        keys, prefixes
    )
