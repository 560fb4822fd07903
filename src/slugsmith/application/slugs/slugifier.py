"""Slugifier – text to a normalised slug fragment."""

from __future__ import annotations

import re
from typing import Final, Protocol, runtime_checkable

_DISALLOWED: Final = re.compile(r"[^a-z0-9\s-]", re.ASCII)
_WHITESPACE_RUN: Final = re.compile(r"\s+")
_HYPHEN_RUN: Final = re.compile(r"-+")


@runtime_checkable
class Slugifier(Protocol):
    """Strategy turning free text into a slug fragment.

    Must be pure: ``None`` maps to ``None`` and equal inputs give equal
    outputs.
    """

    def __call__(self, text: str | None) -> str | None: ...


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


class DefaultSlugifier:
    """Reference slugifier.

    Rules applied in order:
    1. Lowercase (ASCII case mapping only).
    2. Remove characters that are not ``a-z``, ``0-9``, whitespace or ``-``.
    3. Replace each run of whitespace with a single hyphen.
    4. Collapse runs of hyphens.
    5. Optionally strip leading/trailing hyphens (``strip_hyphens=True``).

    Without step 5 ``"  test  "`` becomes ``"-test-"``.
    """

    __slots__ = ("strip_hyphens",)

    def __init__(self, *, strip_hyphens: bool = False) -> None:
        self.strip_hyphens = strip_hyphens

    def __call__(self, text: str | None) -> str | None:
        if text is None:
            return None
        if not text:
            return ""
        value = _DISALLOWED.sub("", _ascii_lower(text))
        value = _WHITESPACE_RUN.sub("-", value)
        value = _HYPHEN_RUN.sub("-", value)
        if self.strip_hyphens:
            value = value.strip("-")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultSlugifier):
            return NotImplemented
        return self.strip_hyphens == other.strip_hyphens

    def __hash__(self) -> int:
        return hash((DefaultSlugifier, self.strip_hyphens))

    def __repr__(self) -> str:
        return f"DefaultSlugifier(strip_hyphens={self.strip_hyphens!r})"


_DEFAULT: Final = DefaultSlugifier()


def slugify(text: str | None) -> str | None:
    """Normalise *text* with the default rules.

    >>> slugify("Hello World!")
    'hello-world'
    """
    return _DEFAULT(text)


__all__ = ["DefaultSlugifier", "Slugifier", "slugify"]
