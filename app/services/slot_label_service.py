from collections.abc import Sequence

from app.core.errors import InvalidOrDuplicateSlot


def add_label(current: Sequence[str], candidate: str) -> list[str]:
    """Return a new list with ``candidate`` appended.

    Blank (whitespace-only) candidates and exact duplicates are rejected with
    InvalidOrDuplicateSlot; ``current`` is never modified. Duplicates are
    compared on the raw string, so "10:00 AM" and "10:00 AM " are distinct.
    """
    if not candidate.strip() or candidate in current:
        raise InvalidOrDuplicateSlot()
    return [*current, candidate]


def remove_label(current: Sequence[str], index: int) -> list[str]:
    """Drop the label at ``index``; an index past the end leaves the list as is."""
    return [label for i, label in enumerate(current) if i != index]

