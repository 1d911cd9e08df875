from __future__ import annotations
import calendar
import logging
from datetime import date, MINYEAR, MAXYEAR
from typing import Optional, List, Tuple

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from .models import ShiftAssignment
from .schema import AssignShift, AssignShiftResult
from worker.models import Worker

logger = logging.getLogger(__name__)

# dialects with a native INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """Inclusive first and last calendar day of the month."""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=422, detail="month must be between 1 and 12")
    if not MINYEAR <= year <= MAXYEAR:
        raise HTTPException(status_code=422, detail="year out of range")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


# LIST (one calendar month)
def get_assignments_for_month(db: Session, *, year: int, month: int) -> List[ShiftAssignment]:
    start, end = month_bounds(year, month)
    stmt = (
        select(ShiftAssignment)
        .join(Worker, Worker.id == ShiftAssignment.worker_id)
        .where(ShiftAssignment.date >= start, ShiftAssignment.date <= end)
        .order_by(ShiftAssignment.date, Worker.name, ShiftAssignment.id)
    )
    return list(db.scalars(stmt))


def get_assignment(db: Session, assignment_id: int) -> ShiftAssignment | None:
    return db.get(ShiftAssignment, assignment_id)


def get_assignment_for_worker_date(db: Session, worker_id: int, day: date) -> Optional[ShiftAssignment]:
    stmt = (
        select(ShiftAssignment)
        .where(ShiftAssignment.worker_id == worker_id, ShiftAssignment.date == day)
        .execution_options(populate_existing=True)
    )
    return db.scalars(stmt).first()


def _upsert(db: Session, worker_id: int, day: date, shift_type: str) -> Tuple[int, str]:
    """Write (worker, day) -> shift_type; returns the persisted row's id and type."""
    insert_fn = _UPSERT_INSERTS.get(db.get_bind().dialect.name)
    if insert_fn is None:
        # no native upsert; the unique constraint still rejects a duplicate row
        row = get_assignment_for_worker_date(db, worker_id, day)
        if row:
            row.shift_type = shift_type
        else:
            row = ShiftAssignment(worker_id=worker_id, date=day, shift_type=shift_type)
            db.add(row)
        db.flush()
        return row.id, row.shift_type

    stmt = insert_fn(ShiftAssignment).values(worker_id=worker_id, date=day, shift_type=shift_type)
    stmt = stmt.on_conflict_do_update(
        index_elements=["worker_id", "date"],
        set_={"shift_type": stmt.excluded.shift_type},
    ).returning(ShiftAssignment.id, ShiftAssignment.shift_type)
    result = db.execute(stmt).one()
    return result.id, result.shift_type


def clear_shift(db: Session, worker_id: int, day: date) -> AssignShiftResult:
    """Remove whatever is assigned to (worker, day). Clearing an empty cell is a no-op."""
    row = get_assignment_for_worker_date(db, worker_id, day)
    if not row:
        return AssignShiftResult(id=None, shift_type=None, message="shift cleared")

    removed_id = row.id
    db.delete(row)
    db.commit()
    logger.info("cleared shift id=%s worker=%s date=%s", removed_id, worker_id, day)
    return AssignShiftResult(id=removed_id, shift_type=None, message="shift cleared")


def assign_shift(db: Session, dto: AssignShift) -> AssignShiftResult:
    if db.get(Worker, dto.worker_id) is None:
        raise HTTPException(status_code=422, detail="worker not found")

    if dto.shift_type is None:
        return clear_shift(db, dto.worker_id, dto.date)

    assignment_id, shift_type = _upsert(db, dto.worker_id, dto.date, dto.shift_type.value)
    db.commit()

    logger.info(
        "assigned shift id=%s worker=%s date=%s type=%s",
        assignment_id, dto.worker_id, dto.date, shift_type,
    )
    return AssignShiftResult(id=assignment_id, shift_type=shift_type, message="shift assigned")


def delete_assignment(db: Session, assignment_id: int) -> None:
    row = db.get(ShiftAssignment, assignment_id)
    if row:
        db.delete(row)
        db.commit()
        logger.info("deleted shift assignment id=%s", assignment_id)
    return
