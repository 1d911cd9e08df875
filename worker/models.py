from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

if TYPE_CHECKING:
    from assignment.models import ShiftAssignment

class Worker(Base):
    __tablename__ = "workers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # external worker code, e.g. EMP001
    code: Mapped[str] = mapped_column(String(32), nullable=False)

    assignments: Mapped[list["ShiftAssignment"]] = relationship(
        "ShiftAssignment", back_populates="worker", passive_deletes=True
    )

    __table_args__ = (
        UniqueConstraint("code", name="uq_workers_code"),
    )
