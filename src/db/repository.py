"""Protocol repository (implemented with SQL Alchemy, but a JSON file / spreadsheet would do just as well)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameResultModel


class ResultRepository(Protocol):
    """Persistence layer orchestration. Results are write-once: there is no update."""

    def add_result(self, result: GameResultModel) -> tuple[GameResultModel, UUID]:
        """Store a finished game and return the stored data + newly created result ID."""
        ...

    def get_result(self, result_id: UUID) -> GameResultModel | None:
        """Get result by ID, if record exists."""
        ...

    def list_results(self) -> list[GameResultModel]:
        """All results, oldest first."""
        ...

    def delete_result(self, result_id: UUID) -> GameResultModel | None:
        """Remove a result's record."""
        ...
