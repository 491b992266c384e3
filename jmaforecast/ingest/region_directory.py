"""Region code to prefecture name lookup."""

from collections.abc import Mapping

from jmaforecast.config.regions import PREFECTURES, UNKNOWN_REGION


class RegionDirectory:
    def __init__(self, table: Mapping[str, str] = PREFECTURES):
        self._table = table

    def lookup(self, code: str) -> str:
        """Return the region name for a code, or UNKNOWN_REGION on a miss."""
        return self._table.get(code.strip(), UNKNOWN_REGION)

    def is_known(self, code: str) -> bool:
        return code.strip() in self._table

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._table.items())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_known(code)

    def __len__(self) -> int:
        return len(self._table)
