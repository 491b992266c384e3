"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest

from jmaforecast.config.schema import AppConfig

SCENARIO_DOCUMENT = [
    {
        "timeSeries": [
            {
                "timeDefines": [
                    "2024-01-01T00:00:00+09:00",
                    "2024-01-02T00:00:00+09:00",
                ],
                "areas": [{"weathers": ["晴れ", "くもり"]}],
            }
        ]
    }
]


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def osaka_raw(fixtures_dir: Path) -> str:
    return (fixtures_dir / "jma_forecast_osaka.json").read_text(encoding="utf-8")


@pytest.fixture
def scenario_raw() -> str:
    """Two-day document with 晴れ then くもり."""
    return json.dumps(SCENARIO_DOCUMENT, ensure_ascii=False)


@pytest.fixture
def scenario_doc() -> list:
    """A mutable copy of the two-day document."""
    return copy.deepcopy(SCENARIO_DOCUMENT)
