"""JMA bosai forecast API client."""

import logging

import httpx

from jmaforecast.models.forecast import FetchError, FetchResult

logger = logging.getLogger(__name__)

JMA_BASE_URL = "https://www.jma.go.jp"
FORECAST_PATH = "/bosai/forecast/data/forecast/{code}.json"
DEFAULT_USER_AGENT = "jmaforecast/0.1.0"


class JmaClient:
    def __init__(
        self,
        base_url: str = JMA_BASE_URL,
        forecast_path: str = FORECAST_PATH,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.forecast_path = forecast_path
        self.user_agent = user_agent
        self.timeout = timeout

    def build_url(self, code: str) -> str:
        return self.base_url + self.forecast_path.format(code=code)

    def fetch(self, url: str) -> FetchResult:
        """GET a forecast document and return its body as text.

        Only HTTP 200 counts as success. Redirects are not followed, so a
        3xx is reported like any other non-200 status. No retries.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("GET %s", url)
        try:
            with httpx.Client(timeout=self.timeout, headers=headers) as client:
                resp = client.get(url)
        except httpx.RequestError as e:
            logger.info("JMA request to %s failed: %s", url, e)
            return FetchError(f"fetch failed: {e}")

        if resp.status_code != httpx.codes.OK:
            logger.info("JMA %s returned %d", url, resp.status_code)
            return FetchError(
                f"fetch failed: HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.content.decode("utf-8")
        except UnicodeDecodeError as e:
            return FetchError(f"fetch failed: response is not UTF-8 ({e.reason})")

    def fetch_region(self, code: str) -> FetchResult:
        return self.fetch(self.build_url(code))
