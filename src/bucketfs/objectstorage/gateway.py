"""Resolve binding names to store handles.

A binding is usable when it exposes the ``StoreHandle`` primitives. The check
is structural since binding names are chosen by whoever configures the
gateway.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from bucketfs.core import get_logger
from bucketfs.core.exceptions import BindingNotFound
from bucketfs.schemas import GatewayConfig

from .clients import S3StoreHandle
from .models import BindingReport
from .store import StoreHandle, satisfies_store

logger = get_logger(__name__)


@dataclass(frozen=True)
class Resolved:
    name: str
    handle: StoreHandle


@dataclass(frozen=True)
class NotFound:
    name: str
    reason: str


Resolution = Union[Resolved, NotFound]


class StoreGateway:
    """Holds the configured bindings and hands out store handles."""

    def __init__(
        self,
        bindings: Mapping[str, object],
        public_domains: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the gateway.

        Args:
            bindings: Binding names mapped to candidate store objects
            public_domains: Binding names mapped to the public domain serving
                their objects
        """
        self._bindings = dict(bindings)
        self._public_domains = dict(public_domains or {})
        logger.debug("Store gateway initialized", binding_count=len(self._bindings))

    @classmethod
    def from_config(cls, config: GatewayConfig) -> "StoreGateway":
        """Build S3-backed handles for every configured binding."""
        bindings = {
            name: S3StoreHandle(binding.bucket_name, binding.client_config())
            for name, binding in config.bindings.items()
        }
        domains = {
            name: binding.public_domain
            for name, binding in config.bindings.items()
            if binding.public_domain
        }
        return cls(bindings, domains)

    def resolve_binding(self, name: str) -> Resolution:
        """Resolve ``name`` without raising."""
        if not name or name not in self._bindings:
            return NotFound(name, "not configured")
        candidate = self._bindings[name]
        if candidate is None or not satisfies_store(candidate):
            return NotFound(name, "does not provide list, put and delete")
        return Resolved(name, candidate)  # type: ignore[arg-type]

    def resolve(self, name: str) -> StoreHandle:
        """Return the handle bound to ``name``.

        Raises:
            BindingNotFound: If the name is unknown or not a usable store
        """
        resolution = self.resolve_binding(name)
        if isinstance(resolution, NotFound):
            logger.warning(
                "Binding resolution failed", binding=name, reason=resolution.reason
            )
            raise BindingNotFound(name, resolution.reason)
        return resolution.handle

    def public_domain(self, name: str) -> Optional[str]:
        return self._public_domains.get(name)

    def report(self) -> BindingReport:
        """Usable binding names and the names that were skipped, both sorted."""
        from bucketfs import __version__

        usable = []
        skipped = []
        for name in self._bindings:
            if isinstance(self.resolve_binding(name), Resolved):
                usable.append(name)
            else:
                skipped.append(name)
        return BindingReport(
            buckets=sorted(usable), debug_keys=sorted(skipped), version=__version__
        )
