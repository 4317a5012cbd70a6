"""Object key and folder prefix helpers.

Object stores have no directories: a "folder" is any prefix ending in the
delimiter, and it exists only as long as some key starts with it.
"""

from typing import Iterable

from bucketfs.core.exceptions import InvalidInput

DELIMITER = "/"


def validate_key(key: str) -> str:
    """Check that ``key`` addresses a single object.

    Raises:
        InvalidInput: If the key is empty, starts with the delimiter or names
            a folder (ends with the delimiter)
    """
    if not isinstance(key, str) or not key:
        raise InvalidInput("Object key must be a non-empty string")
    if key.startswith(DELIMITER):
        raise InvalidInput(f"Object key must not start with '{DELIMITER}': {key}")
    if key.endswith(DELIMITER):
        raise InvalidInput(f"Object key must not end with '{DELIMITER}': {key}")
    return key


def validate_prefix(prefix: str, allow_root: bool = False) -> str:
    """Check that ``prefix`` is a folder prefix.

    The empty string is the bucket root; it is only accepted when
    ``allow_root`` is set since expanding it reaches every object.

    Raises:
        InvalidInput: If the prefix is malformed
    """
    if not isinstance(prefix, str):
        raise InvalidInput("Folder prefix must be a string")
    if prefix == "":
        if allow_root:
            return prefix
        raise InvalidInput("Folder prefix must not be empty")
    if prefix.startswith(DELIMITER):
        raise InvalidInput(f"Folder prefix must not start with '{DELIMITER}': {prefix}")
    if not prefix.endswith(DELIMITER):
        raise InvalidInput(f"Folder prefix must end with '{DELIMITER}': {prefix}")
    return prefix


def split_key(key: str) -> tuple[str, str]:
    """Split a key into its folder prefix and file name.

    >>> split_key("photos/trip/beach.jpg")
    ('photos/trip/', 'beach.jpg')
    >>> split_key("readme.txt")
    ('', 'readme.txt')
    """
    folder, sep, name = key.rpartition(DELIMITER)
    return (folder + sep, name)


def folder_name(prefix: str) -> str:
    """Last segment of a folder prefix (``"a/b/"`` -> ``"b"``)."""
    return prefix.rstrip(DELIMITER).rpartition(DELIMITER)[2]


def ancestor_prefixes(key: str) -> list[str]:
    """Every folder prefix enclosing ``key``, outermost first.

    ``"a/b/c.txt"`` gives ``["a/", "a/b/"]``; a key without a delimiter
    lives at the root and has none.
    """
    parts = key.split(DELIMITER)[:-1]
    prefixes = []
    current = ""
    for part in parts:
        current += part + DELIMITER
        prefixes.append(current)
    return prefixes


def partition_selection(items: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split a mixed selection into object keys and folder prefixes."""
    keys: list[str] = []
    prefixes: list[str] = []
    for item in items:
        if item.endswith(DELIMITER):
            prefixes.append(item)
        else:
            keys.append(item)
    return keys, prefixes
