"""Driver run models."""

from dataclasses import dataclass
from enum import StrEnum


class RunState(StrEnum):
    PRESENTED = "PRESENTED"
    FETCH_FAILED = "FETCH_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    CODE_REJECTED = "CODE_REJECTED"


@dataclass(frozen=True)
class RunOutcome:
    state: RunState
    region_code: str
    entries_count: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.state == RunState.PRESENTED
