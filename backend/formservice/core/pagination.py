"""Pagination Window - clamps raw page/limit input into a deterministic window.

Invariants:
    - page is 1-indexed, never below 1
    - limit is never below 1 and never above the configured maximum
    - offset = (page - 1) * limit always fits a signed 64-bit integer, so an
      absurd page number yields an empty page instead of a store error
    - Non-numeric input falls back to the default instead of raising
"""

import math
from dataclasses import dataclass

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 50
MAX_LIMIT: int = 500
MAX_OFFSET: int = 2**63 - 1


def _coerce_int(raw: object, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return default
    return default


def max_page(limit: int) -> int:
    """Largest page number whose offset still fits a BIGINT for this limit."""
    return MAX_OFFSET // limit + 1


@dataclass(frozen=True)
class Page:
    """A resolved pagination window."""
    number: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit) if total > 0 else 0

    @classmethod
    def parse(
        cls,
        page: object = None,
        limit: object = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "Page":
        """Build a window from untrusted query input. Never raises."""
        size = min(max(1, _coerce_int(limit, default_limit)), max(1, max_limit))
        number = max(1, _coerce_int(page, DEFAULT_PAGE))
        return cls(number=min(number, max_page(size)), limit=size)
