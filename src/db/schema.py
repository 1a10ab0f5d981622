"""Database tables / schema"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGameResult(Base):
    __tablename__ = "game_results"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    player_1_name: Mapped[str]
    player_2_name: Mapped[str]
    status: Mapped[str]
    number_of_turns: Mapped[int]
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    # timedelta stored as plain seconds: keeps the table readable from any SQL client
    duration_seconds: Mapped[float]
