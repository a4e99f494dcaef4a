import logging
import re
from collections.abc import Sequence
from datetime import date, datetime

logger = logging.getLogger(__name__)

NO_SLOTS_MESSAGE = "No available slots for today !!"

_LABEL_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s?(AM|PM)\s*$")


def parse_slot_label(label: str) -> tuple[int, int] | None:
    """Parse "H:MM AM|PM" into a 24-hour (hour, minute). Returns None for anything else."""
    if not isinstance(label, str):
        return None
    m = _LABEL_RE.match(label)
    if not m:
        return None
    hour, minute, suffix = int(m.group(1)), int(m.group(2)), m.group(3)
    if not 1 <= hour <= 12 or minute > 59:
        return None
    if suffix == "PM" and hour != 12:
        hour += 12
    elif suffix == "AM" and hour == 12:
        hour = 0
    return hour, minute


def slot_start(label: str, on: date) -> datetime | None:
    """Local wall-clock start of ``label`` on the given day (seconds zeroed)."""
    parsed = parse_slot_label(label)
    if parsed is None:
        return None
    hour, minute = parsed
    return datetime(on.year, on.month, on.day, hour, minute, 0, 0)


def filter_available(labels: Sequence[str], selected_date: date, now: datetime) -> list[str]:
    """Labels still bookable on ``selected_date`` as seen at ``now``, order preserved.

    Future days keep every label. On any other day a label survives only if
    its start is strictly after ``now``; unparseable labels are dropped.
    """
    if isinstance(selected_date, datetime):
        selected_date = selected_date.date()
    # Wall-clock comparison only
    now = now.replace(tzinfo=None)
    if selected_date > now.date():
        return list(labels)
    out: list[str] = []
    for label in labels:
        start = slot_start(label, selected_date)
        if start is None:
            logger.debug("Skipping unparseable slot label %r", label)
            continue
        if start > now:
            out.append(label)
    return out
