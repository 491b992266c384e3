"""Output formatters for forecast entries."""

import json

from jmaforecast.models.forecast import ForecastEntry

DEFAULT_DATE_FORMAT = "%Y/%m/%d"


def format_entry_text(
    entry: ForecastEntry, date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    """One line: date portion of the timestamp, then the condition text."""
    return f"{entry.date.strftime(date_format)} {entry.condition}"


def format_entries_text(
    entries: list[ForecastEntry], date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    return "\n".join(format_entry_text(e, date_format) for e in entries)


def format_entries_json(entries: list[ForecastEntry]) -> str:
    """JSON array for programmatic consumption."""
    data = [
        {
            "date": e.date.isoformat(),
            "timestamp": e.timestamp.isoformat(),
            "condition": e.condition,
        }
        for e in entries
    ]
    return json.dumps(data, ensure_ascii=False, indent=2)
