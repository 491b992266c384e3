"""Write forecast entries to an output stream."""

import sys
from typing import TextIO

from jmaforecast.config.schema import OutputFormat
from jmaforecast.models.forecast import ForecastEntry
from jmaforecast.reporting.formatters import (
    DEFAULT_DATE_FORMAT,
    format_entries_json,
    format_entries_text,
)


class ForecastPresenter:
    def __init__(
        self,
        stream: TextIO | None = None,
        output_format: OutputFormat = OutputFormat.TEXT,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.output_format = output_format
        self.date_format = date_format

    def present(self, entries: list[ForecastEntry]) -> None:
        if self.output_format == OutputFormat.JSON:
            print(format_entries_json(entries), file=self.stream)
            return
        if entries:
            print(format_entries_text(entries, self.date_format), file=self.stream)

    def announce_region(self, name: str) -> None:
        print(name, file=self.stream)
