"""Expand folder prefixes into the object keys beneath them."""

from typing import Iterable, Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink, LogLevel, default_sink
from bucketfs.core.observability import get_tracer
from bucketfs.objectstorage.models import KeySet
from bucketfs.objectstorage.store import Lister
from bucketfs.path.keys import validate_prefix

from .pager import PaginatedLister

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class PrefixResolver:
    """Collects every key under a set of prefixes into one KeySet."""

    def __init__(self, store: Lister, sink: Optional[EventSink] = None):
        self.sink = default_sink(sink)
        self.lister = PaginatedLister(store, sink=self.sink)

    async def resolve(self, prefixes: Iterable[str]) -> KeySet:
        """Return the keys found under any of ``prefixes``.

        Overlapping prefixes (``"a/"`` and ``"a/b/"``) contribute each key
        once. An empty folder contributes nothing.

        Raises:
            InvalidInput: If any prefix is malformed (checked before listing)
            ListingFailed: If listing any prefix fails
        """
        ordered = sorted({validate_prefix(prefix) for prefix in prefixes})
        keys: KeySet = set()

        with tracer.start_as_current_span("bucketfs.resolve_prefixes") as span:
            span.set_attribute("bucketfs.prefix_count", len(ordered))
            for prefix in ordered:
                before = len(keys)
                await self.lister.list_keys(prefix, into=keys)
                self.sink.emit(
                    LogLevel.INFO,
                    "Prefix expanded",
                    prefix=prefix,
                    new_keys=len(keys) - before,
                )
            span.set_attribute("bucketfs.key_count", len(keys))

        logger.info(
            "Prefixes resolved", prefix_count=len(ordered), key_count=len(keys)
        )
        return keys


async def resolve_prefixes(
    store: Lister, prefixes: Iterable[str], sink: Optional[EventSink] = None
) -> KeySet:
    """Convenience function to expand prefixes into a KeySet."""
    return await PrefixResolver(store, sink=sink).resolve(prefixes)
