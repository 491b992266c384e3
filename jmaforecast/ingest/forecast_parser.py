"""Extract the weather series from a JMA forecast document."""

import json
import re
from datetime import datetime
from typing import Any

from jmaforecast.models.forecast import ForecastEntry, ParseError, ParseResult

# Extended ISO-8601 date and time; fromisoformat alone also takes dates,
# space separators and the basic format
_DATE_TIME_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}")


class _SchemaMismatch(Exception):
    pass


def parse_forecast(raw: str) -> ParseResult:
    """Parse the first time series of the first area into forecast entries.

    The document is expected to look like
    ``[{"timeSeries": [{"timeDefines": [...], "areas": [{"weathers": [...]}]}]}]``.
    Any deviation yields a ParseError and no entries.
    """
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as e:
        return ParseError(f"invalid JSON: {e}")

    try:
        report = _object(_first(doc, "$"), "$[0]")
        series = _object(
            _first(_key(report, "timeSeries", "$[0]"), "$[0].timeSeries"),
            "$[0].timeSeries[0]",
        )
        path = "$[0].timeSeries[0]"
        time_defines = _strings(
            _key(series, "timeDefines", path), f"{path}.timeDefines"
        )
        area = _object(
            _first(_key(series, "areas", path), f"{path}.areas"),
            f"{path}.areas[0]",
        )
        weathers = _strings(
            _key(area, "weathers", f"{path}.areas[0]"),
            f"{path}.areas[0].weathers",
        )
    except _SchemaMismatch as e:
        return ParseError(str(e))

    if len(time_defines) != len(weathers):
        return ParseError(
            f"length mismatch: {len(time_defines)} timeDefines "
            f"but {len(weathers)} weathers"
        )

    entries: list[ForecastEntry] = []
    for i, (stamp, weather) in enumerate(zip(time_defines, weathers)):
        if not _DATE_TIME_RE.match(stamp):
            return ParseError(f"invalid date-time at timeDefines[{i}]: {stamp!r}")
        try:
            timestamp = datetime.fromisoformat(stamp)
        except ValueError:
            return ParseError(f"invalid date-time at timeDefines[{i}]: {stamp!r}")
        entries.append(ForecastEntry(timestamp=timestamp, condition=weather))
    return entries


def _first(value: Any, path: str) -> Any:
    if not isinstance(value, list):
        raise _SchemaMismatch(f"expected array at {path}")
    if not value:
        raise _SchemaMismatch(f"empty array at {path}")
    return value[0]


def _object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise _SchemaMismatch(f"expected object at {path}")
    return value


def _key(obj: dict, key: str, path: str) -> Any:
    if key not in obj:
        raise _SchemaMismatch(f"missing key {key!r} at {path}")
    return obj[key]


def _strings(value: Any, path: str) -> list[str]:
    if not isinstance(value, list):
        raise _SchemaMismatch(f"expected array at {path}")
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise _SchemaMismatch(f"expected string at {path}[{i}]")
    return value
