"""Exception hierarchy for bucketfs."""

from typing import Optional


class BucketFSError(Exception):
    """Base exception for all bucketfs errors."""

    pass


class ValidationError(BucketFSError):
    """Raised when validation fails."""

    pass


class InvalidInput(ValidationError):
    """Raised for a malformed key, prefix or cursor before any store call."""

    pass


class BindingNotFound(BucketFSError):
    """Raised when a binding name cannot be resolved to a usable store."""

    def __init__(self, name: str, reason: str = "not configured"):
        self.name = name
        self.reason = reason
        super().__init__(f"Binding '{name}' is unavailable: {reason}")


class StoreError(BucketFSError):
    """Raised by store primitives."""

    pass


class StoreUnavailable(StoreError):
    """Raised on a transport or service failure talking to the store."""

    pass


class WriteRejected(StoreError):
    """Raised when the store refuses a write."""

    pass


class ListingFailed(BucketFSError):
    """Raised when a listing aborts. Retry the whole operation from scratch."""

    def __init__(self, prefix: str, pages_fetched: int = 0, detail: Optional[str] = None):
        self.prefix = prefix
        self.pages_fetched = pages_fetched
        message = f"Listing failed for prefix '{prefix}' after {pages_fetched} page(s)"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DeletePartial(BucketFSError):
    """Raised when a bulk delete stops at a failed chunk.

    Chunks before ``failed_at_chunk`` were applied; the failed chunk and the
    ones after it were not confirmed.
    """

    def __init__(self, deleted_count: int, failed_at_chunk: int, requested: int):
        self.deleted_count = deleted_count
        self.failed_at_chunk = failed_at_chunk
        self.requested = requested
        super().__init__(
            f"Bulk delete stopped at chunk {failed_at_chunk}: "
            f"{deleted_count} of {requested} key(s) deleted"
        )
