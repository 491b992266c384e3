"""JMA forecast data models and stage result types."""

import datetime as dt
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class ForecastEntry:
    timestamp: dt.datetime
    condition: str

    @property
    def date(self) -> dt.date:
        # Local date as written in the document, the offset is not applied
        return self.timestamp.date()


@dataclass(frozen=True)
class FetchError:
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class ParseError:
    message: str


FetchResult: TypeAlias = str | FetchError
ParseResult: TypeAlias = list[ForecastEntry] | ParseError
