"""Listing snapshots returned by object stores."""

import base64
import binascii
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from bucketfs.core.exceptions import InvalidInput

# A deduplicated collection of object keys; order carries no meaning.
KeySet = set[str]


@dataclass(frozen=True)
class ObjectEntry:
    """One object as reported by a listing call.

    Attributes:
        key: Full object key
        size: Size in bytes
        uploaded_at: Last-modified timestamp reported by the store
        etag: Entity tag reported by the store
        content_type: MIME type, when the store reports it in listings
    """

    key: str
    size: int = 0
    uploaded_at: Optional[datetime] = None
    etag: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def name(self) -> str:
        return self.key.rpartition("/")[2]


@dataclass(frozen=True)
class Page:
    """One page of a listing.

    ``truncated`` is the only signal that more pages exist; a truncated page
    may be empty. ``cursor`` must be passed back to the store unchanged.
    """

    objects: tuple[ObjectEntry, ...] = ()
    delimited_prefixes: tuple[str, ...] = ()
    cursor: Optional[str] = None
    truncated: bool = False


@dataclass(frozen=True)
class ListingCursor:
    """Continuation token bound to the listing query that issued it."""

    prefix: str
    delimiter: Optional[str]
    token: str

    def matches(self, prefix: str, delimiter: Optional[str]) -> bool:
        return self.prefix == prefix and self.delimiter == delimiter

    def encode(self) -> str:
        """Opaque text form that keeps the prefix and delimiter."""
        raw = json.dumps(asdict(self), separators=(",", ":")).encode()
        return base64.urlsafe_b64encode(raw).decode("ascii")

    @classmethod
    def decode(cls, value: str) -> "ListingCursor":
        """Parse the output of ``encode``.

        Raises:
            InvalidInput: If ``value`` is not an encoded cursor
        """
        try:
            data = json.loads(base64.urlsafe_b64decode(value.encode("ascii")))
            return cls(
                prefix=str(data["prefix"]),
                delimiter=data["delimiter"],
                token=str(data["token"]),
            )
        except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError) as e:
            raise InvalidInput(f"Malformed cursor: {value!r}") from e


@dataclass(frozen=True)
class FolderListing:
    """Immediate children of one prefix, in store order."""

    prefix: str
    objects: tuple[ObjectEntry, ...] = ()
    folders: tuple[str, ...] = ()
    cursor: Optional[ListingCursor] = None

    @property
    def truncated(self) -> bool:
        return self.cursor is not None


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a completed bulk delete."""

    requested: int
    deleted_count: int
    chunk_count: int


@dataclass(frozen=True)
class BindingReport:
    """Configured bindings split by whether they satisfy the store contract."""

    buckets: list[str] = field(default_factory=list)
    debug_keys: list[str] = field(default_factory=list)
    version: str = ""
