"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from bucketfs import __version__
from bucketfs.cli import app
from bucketfs.objectstorage.models import ListingCursor

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "buckets.json"
    path.write_text(
        json.dumps(
            {
                "bindings": {
                    "MEDIA": {
                        "bucket_name": "test-bucket",
                        "region_name": "us-east-1",
                        "public_domain": "cdn.example.com",
                    }
                }
            }
        )
    )
    return str(path)


@pytest.fixture
def seeded(s3_client):
    for key in ["photos/a.jpg", "photos/trip/b.jpg", "docs/c.pdf", "readme.txt"]:
        s3_client.put_object(Bucket="test-bucket", Key=key, Body=b"data")
    return s3_client


class TestCli:
    """Test CLI commands against mocked S3."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_buckets(self, config_file):
        result = runner.invoke(app, ["--config", config_file, "buckets"])

        assert result.exit_code == 0
        assert "MEDIA" in result.output

    def test_ls(self, config_file, seeded):
        result = runner.invoke(app, ["--config", config_file, "ls", "MEDIA", "photos/"])

        assert result.exit_code == 0
        assert "photos/trip/" in result.output
        assert "photos/a.jpg" in result.output

    def test_ls_pages_with_cursor(self, config_file, seeded):
        """The printed cursor continues the same folder listing."""
        args = ["--config", config_file, "ls", "MEDIA", "photos/", "--limit", "1"]
        first = runner.invoke(app, args)

        assert first.exit_code == 0
        cursor = first.output.split("Next cursor: ")[1].strip()
        assert ListingCursor.decode(cursor).prefix == "photos/"

        second = runner.invoke(app, [*args, "--cursor", cursor])

        assert second.exit_code == 0
        assert "Next cursor" not in second.output

    def test_ls_cursor_for_other_prefix(self, config_file, seeded):
        """A cursor printed for one folder is refused for another."""
        cursor = ListingCursor(prefix="docs/", delimiter="/", token="abc").encode()

        result = runner.invoke(
            app, ["--config", config_file, "ls", "MEDIA", "photos/", "--cursor", cursor]
        )

        assert result.exit_code == 1
        assert "Cursor was issued for prefix 'docs/'" in result.output

    def test_ls_malformed_cursor(self, config_file, seeded):
        result = runner.invoke(
            app, ["--config", config_file, "ls", "MEDIA", "photos/", "--cursor", "%%%"]
        )

        assert result.exit_code == 1
        assert "Malformed cursor" in result.output

    def test_tree(self, config_file, seeded):
        result = runner.invoke(app, ["--config", config_file, "tree", "MEDIA"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["docs/", "photos/", "  trip/"]

    def test_folders(self, config_file, seeded):
        result = runner.invoke(app, ["--config", config_file, "folders", "MEDIA"])

        assert result.exit_code == 0
        assert "photos/trip/" in result.output

    def test_rm_folder(self, config_file, seeded):
        result = runner.invoke(
            app, ["--config", config_file, "rm", "MEDIA", "photos/", "--yes"]
        )

        assert result.exit_code == 0
        assert "Deleted 2 object(s)" in result.output
        remaining = seeded.list_objects_v2(Bucket="test-bucket")["Contents"]
        assert sorted(obj["Key"] for obj in remaining) == ["docs/c.pdf", "readme.txt"]

    def test_urls(self, config_file, seeded):
        result = runner.invoke(app, ["--config", config_file, "urls", "MEDIA", "photos/trip/"])

        assert result.exit_code == 0
        assert "https://cdn.example.com/photos/trip/b.jpg" in result.output

    def test_urls_public_domain_override(self, seeded):
        """--public-domain on the urls command applies to ad-hoc buckets."""
        result = runner.invoke(
            app,
            [
                "--bucket", "test-bucket", "--region", "us-east-1",
                "urls", "test-bucket", "docs/c.pdf", "--public-domain", "files.example.com",
            ],
        )

        assert result.exit_code == 0
        assert result.output.strip() == "https://files.example.com/docs/c.pdf"

    def test_public_domain_not_a_global_option(self, seeded):
        result = runner.invoke(
            app, ["--public-domain", "files.example.com", "--bucket", "test-bucket", "buckets"]
        )

        assert result.exit_code != 0

    def test_put(self, config_file, s3_client, tmp_path):
        local = tmp_path / "notes.txt"
        local.write_text("hello")

        result = runner.invoke(
            app, ["--config", config_file, "put", "MEDIA", "docs/notes.txt", str(local)]
        )

        assert result.exit_code == 0
        head = s3_client.head_object(Bucket="test-bucket", Key="docs/notes.txt")
        assert head["ContentType"] == "text/plain"

    def test_ad_hoc_bucket(self, seeded):
        result = runner.invoke(
            app, ["--bucket", "test-bucket", "--region", "us-east-1", "ls", "test-bucket"]
        )

        assert result.exit_code == 0
        assert "readme.txt" in result.output

    def test_unknown_binding(self, config_file):
        result = runner.invoke(app, ["--config", config_file, "ls", "OTHER"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_prefix(self, config_file, seeded):
        result = runner.invoke(app, ["--config", config_file, "ls", "MEDIA", "photos"])

        assert result.exit_code == 1
        assert "must end with" in result.output
