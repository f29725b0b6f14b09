"""Slug helpers built on unicode NFKD decomposition."""

from __future__ import annotations

import re
import string
import unicodedata

_SEPARATOR = "-"
_BOUNDARY_REGEX = re.compile(r"[^a-zA-Z0-9]+")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_SPACES = frozenset(" _")


def _decompose(value: str) -> str:
    # Combining marks vanish without leaving a boundary: "é" -> "e".
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(
        ch for ch in normalized if not unicodedata.category(ch).startswith("M")
    )


def slugify(
    value: str, preserve_case: bool = False, *, max_length: int | None = None
) -> str:
    """Convert ``value`` into a URL-safe slug.

    The result only holds ASCII letters, digits and ``-``; it never starts or
    ends with ``-`` and never contains two in a row. Code points without an
    ASCII decomposition (ideographs, most non-Latin letters) act as word
    boundaries and are otherwise dropped.

    >>> slugify("Café déjà vu")
    'cafe-deja-vu'
    >>> slugify("Hello world", preserve_case=True)
    'Hello-world'
    """
    slug = _BOUNDARY_REGEX.sub(_SEPARATOR, _decompose(value)).strip(_SEPARATOR)
    if not preserve_case:
        slug = slug.lower()
    if max_length is not None and max_length > 0:
        slug = slug[:max_length].rstrip(_SEPARATOR)
    return slug


def slugify_filename(value: str, preserve_case: bool = False) -> str:
    """Convert ``value`` into an ASCII file name, keeping spaces, ``_`` and ``.``.

    Runs of spaces/underscores and runs of dots collapse to their first
    character; everything else that is not alphanumeric becomes a single
    ``-``. Trailing dashes and spaces are removed.

    >>> slugify_filename("You & Me")
    'you - me'
    >>> slugify_filename("roman.  txt")
    'roman. txt'
    """
    out: list[str] = []
    prev_dash = True
    prev_space = True
    prev_dot = False
    for ch in _decompose(value):
        if ch in _ALNUM:
            out.append(ch if preserve_case else ch.lower())
            prev_dash = prev_space = prev_dot = False
        elif ch in _SPACES:
            if not prev_space:
                out.append(ch)
                prev_dash = prev_dot = False
                prev_space = True
        elif ch == ".":
            if not prev_dot:
                out.append(ch)
                prev_dash = prev_space = False
                prev_dot = True
        elif not prev_dash:
            out.append(_SEPARATOR)
            prev_space = prev_dot = False
            prev_dash = True

    while out and out[-1] in (_SEPARATOR, " "):
        out.pop()
    return "".join(out)
