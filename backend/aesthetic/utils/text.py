"""Small list/string helpers shared by every synthesis stage."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

HEX_COLOR = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def dedupe(items: Iterable[str | None]) -> list[str]:
    """Trim, drop empties, and remove exact duplicates keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        if not item:
            continue
        value = item.strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def rotate_list(items: Sequence[T], seed: int) -> list[T]:
    """Circular left-shift by ``|seed| mod len(items)``.

    Same seed, same order. This is the only source of variety between
    template plans, so it stays plain arithmetic.
    """
    if not items:
        return []
    shift = abs(int(seed)) % len(items)
    return list(items[shift:]) + list(items[:shift])


def title_case(value: str) -> str:
    """Upper-case the first letter of each space-separated word."""
    return " ".join(part[:1].upper() + part[1:] for part in value.split(" ") if part)


def format_list(items: Sequence[str]) -> str:
    """Join as ``a, b and c``."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]


def normalize_term(value: object) -> str:
    """Lower-case, replace non-alphanumerics with spaces, collapse whitespace."""
    lowered = str(value or "").lower()
    return _WHITESPACE.sub(" ", _NON_ALNUM.sub(" ", lowered)).strip()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and HEX_COLOR.match(value) is not None


def rgb_to_hex(red: float = 0, green: float = 0, blue: float = 0) -> str:
    """``#RRGGBB`` (upper-case) from 0-255 channel values, clamped and rounded."""

    def channel(value: float) -> str:
        return f"{max(0, min(255, round(value))):02X}"

    return f"#{channel(red)}{channel(green)}{channel(blue)}"
