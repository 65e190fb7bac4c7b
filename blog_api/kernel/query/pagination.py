"""
Page request normalization.
"""

from dataclasses import dataclass
from typing import Optional

# Defaults used when no settings are supplied
DEFAULT_PAGE_SIZE = 15
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """A validated, 1-based page request."""

    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def clamp_page_size(
    page_size: Optional[int],
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    """Absent or non-positive sizes fall back to ``default``; large ones are capped."""
    if page_size is None or page_size <= 0:
        return min(default, maximum)
    return min(page_size, maximum)


def normalize_page(
    page: Optional[int],
    page_size: Optional[int],
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> PageRequest:
    """Clamp caller-supplied pagination instead of rejecting it."""
    if page is None or page < 1:
        page = 1
    return PageRequest(page=page, page_size=clamp_page_size(page_size, default, maximum))
