"""Capabilities a bucket binding must provide.

The core only needs three primitives from an object store. Each is its own
protocol so a binding can be checked structurally when it is resolved.
"""

from typing import BinaryIO, Optional, Protocol, Union, runtime_checkable

from .models import Page

# Hard per-call limit on keys accepted by ``Deleter.delete``.
MAX_DELETE_KEYS = 1000

Body = Union[bytes, BinaryIO]


@runtime_checkable
class Lister(Protocol):
    async def list(
        self,
        prefix: str,
        cursor: Optional[str] = None,
        delimiter: Optional[str] = None,
        limit: int = 1000,
    ) -> Page: ...


@runtime_checkable
class Writer(Protocol):
    async def put(self, key: str, body: Body, content_type: str) -> None: ...


@runtime_checkable
class Deleter(Protocol):
    async def delete(self, keys: list[str]) -> None: ...


@runtime_checkable
class StoreHandle(Lister, Writer, Deleter, Protocol):
    """A bucket that can be listed, written to and deleted from."""

    pass


def satisfies_store(candidate: object) -> bool:
    """Whether ``candidate`` exposes every primitive of ``StoreHandle``."""
    return (
        isinstance(candidate, Lister)
        and isinstance(candidate, Writer)
        and isinstance(candidate, Deleter)
    )
