from abc import ABC, abstractmethod


class SpreadsheetAppender(ABC):
    """Appends rows to an external spreadsheet. Implementations raise on failure."""

    @abstractmethod
    async def append_row(self, target_id: str, range_: str, values: list[str]) -> dict:
        pass
