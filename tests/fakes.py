"""In-memory stores used across the test suite."""

from bucketfs.core.exceptions import StoreUnavailable
from bucketfs.objectstorage.models import ObjectEntry, Page


class InMemoryStore:
    """Dictionary-backed store that paginates like S3 (cursor = key offset)."""

    def __init__(self, keys=(), fail_on_delete_call=None):
        self.objects = {key: b"x" for key in keys}
        self.content_types = {}
        self.list_calls = []
        self.delete_calls = []
        self.fail_on_delete_call = fail_on_delete_call

    async def list(self, prefix, cursor=None, delimiter=None, limit=1000):
        self.list_calls.append((prefix, cursor, delimiter, limit))
        keys = sorted(k for k in self.objects if k.startswith(prefix))
        index = int(cursor) if cursor else 0
        objects = []
        prefixes = []
        while index < len(keys) and len(objects) + len(prefixes) < limit:
            key = keys[index]
            index += 1
            rest = key[len(prefix):]
            if delimiter and delimiter in rest:
                folder = prefix + rest.split(delimiter)[0] + delimiter
                if folder not in prefixes:
                    prefixes.append(folder)
                continue
            objects.append(ObjectEntry(key=key, size=len(self.objects[key])))
        truncated = index < len(keys)
        return Page(
            objects=tuple(objects),
            delimited_prefixes=tuple(prefixes),
            cursor=str(index) if truncated else None,
            truncated=truncated,
        )

    async def put(self, key, body, content_type):
        self.objects[key] = body if isinstance(body, bytes) else body.read()
        self.content_types[key] = content_type

    async def delete(self, keys):
        self.delete_calls.append(list(keys))
        if self.fail_on_delete_call == len(self.delete_calls) - 1:
            raise StoreUnavailable("connection reset")
        for key in keys:
            self.objects.pop(key, None)


class ScriptedStore:
    """Returns a fixed sequence of pages and records every list call."""

    def __init__(self, pages, error_on_call=None):
        self.pages = list(pages)
        self.calls = []
        self.error_on_call = error_on_call

    async def list(self, prefix, cursor=None, delimiter=None, limit=1000):
        self.calls.append({"prefix": prefix, "cursor": cursor, "delimiter": delimiter, "limit": limit})
        if self.error_on_call == len(self.calls) - 1:
            raise StoreUnavailable("timed out")
        return self.pages[len(self.calls) - 1]

    async def put(self, key, body, content_type):
        raise AssertionError("unexpected put")

    async def delete(self, keys):
        raise AssertionError("unexpected delete")


def make_page(keys, cursor=None, truncated=False, prefixes=()):
    """Build a page whose objects have the given keys."""
    return Page(
        objects=tuple(ObjectEntry(key=key, size=1) for key in keys),
        delimited_prefixes=tuple(prefixes),
        cursor=cursor,
        truncated=truncated,
    )
