"""SQLAlchemy ORM models for Pomodoro."""

from datetime import datetime
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class CompletedCycle(Base):
    """One finished session of four work intervals."""

    __tablename__ = "completed_cycles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    finished_at = Column(DateTime, nullable=False, default=datetime.now)
    work_duration = Column(Integer, nullable=False)     # seconds
    break_duration = Column(Integer, nullable=False)    # seconds

    def __repr__(self) -> str:
        return (
            f"<CompletedCycle id={self.id} finished_at={self.finished_at} "
            f"work={self.work_duration}s break={self.break_duration}s>"
        )
