"""Route name inflections used to derive domains and cache keys."""

import re
from typing import Optional

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s\-]+")


def underscore(word: Optional[str]) -> str:
    """Convert "PostsComments" / "posts-comments" to "posts_comments"."""
    if not word:
        return ""
    word = _SEPARATORS.sub("_", word.strip())
    return _CAMEL_BOUNDARY.sub("_", word).lower()


def camelize(word: Optional[str]) -> str:
    """Convert "my_plugin" / "my-plugin" to "MyPlugin"."""
    if not word:
        return ""
    parts = re.split(r"[_\s\-]+", word.strip())
    return "".join(part[:1].upper() + part[1:] for part in parts if part)
