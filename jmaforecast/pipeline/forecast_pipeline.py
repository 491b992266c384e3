"""Forecast pipeline: fetch, parse and present one region's forecast."""

import logging
import sys
from typing import TextIO

from jmaforecast.config.regions import UNKNOWN_REGION
from jmaforecast.ingest.forecast_parser import parse_forecast
from jmaforecast.ingest.jma_client import JmaClient
from jmaforecast.ingest.region_directory import RegionDirectory
from jmaforecast.models.forecast import FetchError, ParseError
from jmaforecast.models.run import RunOutcome, RunState
from jmaforecast.reporting.presenter import ForecastPresenter

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        client: JmaClient,
        presenter: ForecastPresenter,
        directory: RegionDirectory | None = None,
        error_stream: TextIO | None = None,
    ):
        self.client = client
        self.presenter = presenter
        self.directory = directory if directory is not None else RegionDirectory()
        self.error_stream = error_stream if error_stream is not None else sys.stderr

    def run(self, code: str) -> RunOutcome:
        """Fetch, parse and present the forecast for a region code.

        Each stage's failure ends the run before the next stage starts, so
        nothing is presented unless the whole document parsed.
        """
        logger.info("Fetching forecast for %s", code)

        body = self.client.fetch_region(code)
        if isinstance(body, FetchError):
            self._report("fetch error", body.message)
            return RunOutcome(RunState.FETCH_FAILED, code, error=body.message)

        entries = parse_forecast(body)
        if isinstance(entries, ParseError):
            self._report("parse error", entries.message)
            return RunOutcome(RunState.PARSE_FAILED, code, error=entries.message)

        self.presenter.present(entries)
        logger.info("Presented %d entries for %s", len(entries), code)
        return RunOutcome(RunState.PRESENTED, code, entries_count=len(entries))

    def run_interactive(self, input_stream: TextIO) -> RunOutcome:
        """Read a region code from one input line, resolve it, then run."""
        code = input_stream.readline().strip()
        name = self.directory.lookup(code)
        if name == UNKNOWN_REGION:
            self._report(UNKNOWN_REGION, code)
            return RunOutcome(
                RunState.CODE_REJECTED, code, error=f"{UNKNOWN_REGION}: {code}"
            )

        self.presenter.announce_region(name)
        return self.run(code)

    def _report(self, label: str, message: str) -> None:
        logger.debug("%s: %s", label, message)
        print(f"{label}: {message}", file=self.error_stream)
