"""Tests for binding resolution."""

import pytest

from bucketfs import __version__
from bucketfs.core.exceptions import BindingNotFound
from bucketfs.objectstorage.clients import S3StoreHandle
from bucketfs.objectstorage.gateway import NotFound, Resolved, StoreGateway
from bucketfs.schemas import GatewayConfig
from fakes import InMemoryStore


class ReadOnlyStore:
    """Lists but cannot write."""

    async def list(self, prefix, cursor=None, delimiter=None, limit=1000):
        raise AssertionError("unexpected list")


class TestStoreGateway:
    """Test resolving binding names to store handles."""

    def test_resolve(self):
        """A configured store is returned as-is."""
        store = InMemoryStore()
        gateway = StoreGateway({"MEDIA": store})

        assert gateway.resolve("MEDIA") is store
        assert gateway.resolve_binding("MEDIA") == Resolved("MEDIA", store)

    def test_unknown_binding(self):
        """Unknown names raise BindingNotFound."""
        gateway = StoreGateway({"MEDIA": InMemoryStore()})

        with pytest.raises(BindingNotFound) as exc_info:
            gateway.resolve("OTHER")

        assert exc_info.value.name == "OTHER"
        assert isinstance(gateway.resolve_binding("OTHER"), NotFound)

    @pytest.mark.parametrize("candidate", [ReadOnlyStore(), "a string", 42, None])
    def test_binding_without_capabilities(self, candidate):
        """Bound objects lacking the store primitives are rejected."""
        gateway = StoreGateway({"ODD": candidate})

        with pytest.raises(BindingNotFound, match="does not provide"):
            gateway.resolve("ODD")

    def test_report(self):
        """Usable and skipped bindings are reported sorted."""
        gateway = StoreGateway(
            {
                "ZETA": InMemoryStore(),
                "ALPHA": InMemoryStore(),
                "SECRET_KEY": "abc",
                "ASSETS_URL": "https://example.com",
            }
        )

        report = gateway.report()

        assert report.buckets == ["ALPHA", "ZETA"]
        assert report.debug_keys == ["ASSETS_URL", "SECRET_KEY"]
        assert report.version == __version__

    def test_from_config(self):
        """Configured S3 bindings become S3 store handles."""
        config = GatewayConfig.model_validate(
            {
                "bindings": {
                    "MEDIA": {
                        "bucket_name": "media-bucket",
                        "endpoint_url": "https://example.r2.cloudflarestorage.com",
                        "public_domain": "cdn.example.com",
                    }
                }
            }
        )

        gateway = StoreGateway.from_config(config)
        handle = gateway.resolve("MEDIA")

        assert isinstance(handle, S3StoreHandle)
        assert handle.bucket == "media-bucket"
        assert gateway.public_domain("MEDIA") == "cdn.example.com"
        assert gateway.public_domain("OTHER") is None
