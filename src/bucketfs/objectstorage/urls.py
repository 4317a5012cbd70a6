"""Public URLs for objects served from a bucket's public domain."""

from typing import Iterable, Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink
from bucketfs.core.exceptions import InvalidInput
from bucketfs.objectstorage.listing.resolver import PrefixResolver
from bucketfs.objectstorage.store import Lister
from bucketfs.path.keys import validate_key

logger = get_logger(__name__)


def build_public_url(public_domain: str, key: str) -> str:
    """``https://<domain>/<key>``; a scheme already on the domain is kept."""
    domain = public_domain.rstrip("/")
    if not domain.startswith(("http://", "https://")):
        domain = f"https://{domain}"
    return f"{domain}/{key}"


async def export_urls(
    store: Lister,
    public_domain: Optional[str],
    keys: Iterable[str] = (),
    prefixes: Iterable[str] = (),
    sink: Optional[EventSink] = None,
) -> list[str]:
    """Public URLs for ``keys`` and every object under ``prefixes``, sorted.

    Raises:
        InvalidInput: If no public domain is configured or an item is malformed
        ListingFailed: If expanding a prefix fails
    """
    if not public_domain or not public_domain.strip("/"):
        raise InvalidInput("A public domain is required to build object URLs")

    key_set = {validate_key(key) for key in keys}
    prefixes = list(prefixes)
    if prefixes:
        key_set |= await PrefixResolver(store, sink=sink).resolve(prefixes)

    urls = [build_public_url(public_domain, key) for key in sorted(key_set)]
    logger.info("Public URLs exported", count=len(urls))
    return urls
