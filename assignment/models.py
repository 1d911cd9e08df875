from __future__ import annotations
import datetime as dt
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import Date, String, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from worker.models import Worker

class ShiftType(str, Enum):
    S1 = "S1"
    S2 = "S2"
    S3 = "S3"
    S4 = "S4"
    S5 = "S5"

class ShiftAssignment(Base):
    __tablename__ = "shift_assignments"

    id: Mapped[int] = mapped_column(primary_key=True)
    worker_id: Mapped[int] = mapped_column(
        ForeignKey("workers.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date(), nullable=False)

    # plain string, not SAEnum: rows with tags outside ShiftType are tolerated
    # on read and ignored by the monthly summary
    shift_type: Mapped[str] = mapped_column(String(16), nullable=False)

    worker: Mapped["Worker"] = relationship("Worker", back_populates="assignments", lazy="joined")

    @property
    def worker_name(self) -> str:
        return self.worker.name

    @property
    def worker_code(self) -> str:
        return self.worker.code

    __table_args__ = (
        UniqueConstraint("worker_id", "date", name="uq_shift_assignment_worker_date"),
    )

Index("ix_shift_assignments_date", ShiftAssignment.date)
