"""Input Validation — pure checks run before every persistence call.

Invariants:
    - Every validate_* function is PURE: no IO, no clock reads, never raises
    - Success returns the parsed value object; failure returns Invalid(field, message)
    - Accepted text (username, description) is stored exactly as submitted
    - Empty strings are treated as absent for optional fields
    - duration is any integer ("30", "-5", "+0"); "30.5", "abc" are rejected
    - limit is a whole number >= 1
    - Integer strings are bounded to 18 digits, so int() never hits its size limit
    - Dates are ISO calendar dates; an ISO datetime keeps only its date part

Design Decisions:
    - Result objects over exceptions: the shell decides how an Invalid is surfaced
    - `today` is a parameter, not datetime.now(): keeps defaults deterministic in tests
    - JSON clients may send duration/limit as numbers; form clients always send strings
"""

import re
from datetime import date, datetime

from exercise_tracker.core.domain_types import Invalid, LogQuery, NewExercise


_INTEGER = re.compile(r"^\s*[+-]?\d{1,18}\s*$")


def validate_username(raw: object) -> str | Invalid:
    """Username is required and non-blank."""
    if not isinstance(raw, str) or not raw.strip():
        return Invalid("username", "Path `username` is required.")
    return raw


def validate_new_exercise(
    description: object, duration: object, date_raw: object, today: date,
) -> NewExercise | Invalid:
    """Validate exercise fields. Missing date resolves to `today`."""
    if not isinstance(description, str) or not description.strip():
        return Invalid("description", "Path `description` is required.")

    if _is_absent(duration):
        return Invalid("duration", "Path `duration` is required.")
    minutes = parse_integer(duration)
    if minutes is None:
        return Invalid(
            "duration",
            f"Duration must be an integer number of minutes, got {duration!r}.",
        )

    if _is_absent(date_raw):
        entry_date = today
    else:
        entry_date = parse_calendar_date(date_raw)
        if entry_date is None:
            return Invalid("date", f"Invalid date {date_raw!r}, expected yyyy-mm-dd.")

    return NewExercise(description=description, duration=minutes, date=entry_date)


def validate_log_query(
    from_raw: object, to_raw: object, limit_raw: object,
) -> LogQuery | Invalid:
    """Validate optional log filters. Absent filters stay None."""
    bounds: dict[str, date | None] = {}
    for name, raw in (("from", from_raw), ("to", to_raw)):
        if _is_absent(raw):
            bounds[name] = None
            continue
        parsed = parse_calendar_date(raw)
        if parsed is None:
            return Invalid(name, f"Invalid date {raw!r}, expected yyyy-mm-dd.")
        bounds[name] = parsed

    limit = None
    if not _is_absent(limit_raw):
        limit = parse_whole_number(limit_raw)
        if limit is None:
            return Invalid(
                "limit", f"Limit must be a positive whole number, got {limit_raw!r}.",
            )

    return LogQuery(from_date=bounds["from"], to_date=bounds["to"], limit=limit)


# ─── Parsers ─────────────────────────────────────────────────────


def parse_integer(raw: object) -> int | None:
    """Parse a signed integer from an int or a bounded digit string."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _INTEGER.match(raw):
        return None
    return int(raw)


def parse_whole_number(raw: object) -> int | None:
    """Parse a positive whole number (>= 1)."""
    value = parse_integer(raw)
    return value if value is not None and value >= 1 else None


def parse_calendar_date(raw: object) -> date | None:
    """Parse an ISO date (or the date part of an ISO datetime)."""
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _is_absent(raw: object) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())
