"""Slug derivation from page titles."""

import re

SLUG_REMOVE = re.compile(r"['\"/\\]")
SLUG_REDUCE = re.compile(r"[:,/?! ]")
SLUG_DASHES = re.compile(r"-+-")


def slugify(title: str) -> str:
    """Turn a title into the expected URL slug.

    ``#`` becomes ``-sharp-`` and ``.`` becomes ``-dot-``, so that
    "C#" and ".NET" keep a readable trace in the slug.

    Args:
        title: Page title.

    Returns:
        Lowercase, dash-separated slug.
    """
    slug = title.lower()
    slug = slug.replace("#", "-sharp-")
    slug = slug.replace(".", "-dot-")
    slug = SLUG_REMOVE.sub("", slug)
    slug = SLUG_REDUCE.sub("-", slug)
    slug = SLUG_DASHES.sub("-", slug)
    return slug.strip("-")
