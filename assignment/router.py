from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import MAX_ID, get_db

from .schema import (
    AssignmentSchema,
    AssignShiftPayload,
    AssignShift,
    AssignShiftResult,
    )
from . import service


assignment_router = APIRouter(prefix="/shifts", tags=["Shifts"])

# List assignments for one calendar month
@assignment_router.get("/{year}/{month}", response_model=list[AssignmentSchema])
def list_assignments(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
    ):
    return service.get_assignments_for_month(db, year=year, month=month)

# Assign (or clear) the shift for a worker on a date
@assignment_router.post("", response_model=AssignShiftResult)
def assign_shift(
    payload: AssignShiftPayload,
    db: Session = Depends(get_db),
    ):
    dto = AssignShift(**payload.model_dump())
    try:
        return service.assign_shift(db, dto)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="conflicting assignment for this worker/date")

# Delete assignment by id
@assignment_router.delete("/{assignment_id}")
def delete_assignment(
    assignment_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    ):
    if not service.get_assignment(db, assignment_id):
        raise HTTPException(status_code=404, detail="assignment not found")
    service.delete_assignment(db, assignment_id)
    return {"message": "assignment deleted"}
