"""Implementation of (Result)Repository using SQLAlchemy"""

from datetime import timedelta
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameResultModel
from src.core.shared_types import Status
from src.db.schema import DBGameResult


class SQLResultRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def add_result(self, result: GameResultModel) -> tuple[GameResultModel, UUID]:
        """Store a finished game and return the stored data + newly created result ID."""
        new_id = uuid4()
        result_db = DBGameResult(
            id=new_id,
            player_1_name=result.player_1_name,
            player_2_name=result.player_2_name,
            status=result.status.value,
            number_of_turns=result.number_of_turns,
            created=result.created,
            duration_seconds=result.duration.total_seconds(),
        )
        self.db.add(result_db)
        self._commit(
            f"Could not store result of {result.player_1_name} vs {result.player_2_name}."
        )
        self.db.refresh(result_db)
        return self._to_model(result_db), new_id

    def get_result(self, result_id: UUID) -> GameResultModel | None:
        """Get result by ID, if record exists."""
        result_db = self._fetch_result(result_id)
        if result_db:
            return self._to_model(result_db)
        return None

    def list_results(self) -> list[GameResultModel]:
        """All results, oldest first."""
        query = select(DBGameResult).order_by(DBGameResult.created)
        return [self._to_model(result_db) for result_db in self.db.scalars(query)]

    def delete_result(self, result_id: UUID) -> GameResultModel | None:
        """Remove a result's record."""
        result_db = self._fetch_result(result_id)
        if not result_db:
            return None
        result_model = self._to_model(result_db)
        self.db.delete(result_db)
        self._commit(f"Could not delete result {result_id}.")
        return result_model

    def _commit(self, error_message: str) -> None:
        """Commit, or undo the pending changes and report the failure as a RepositoryError."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(error_message) from e

    def _fetch_result(self, result_id: UUID) -> DBGameResult | None:
        query = select(DBGameResult).where(DBGameResult.id == result_id)
        return self.db.scalar(query)

    def _to_model(self, result_db: DBGameResult) -> GameResultModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameResultModel(
            player_1_name=result_db.player_1_name,
            player_2_name=result_db.player_2_name,
            status=Status(result_db.status),
            number_of_turns=result_db.number_of_turns,
            created=result_db.created,
            duration=timedelta(seconds=result_db.duration_seconds),
        )
