from __future__ import annotations
import datetime as dt
import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from core.database import MAX_ID
from .models import ShiftType

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class AssignmentSchema(BaseModel):
    id: int
    worker_id: int
    date: dt.date
    shift_type: str
    worker_name: str
    worker_code: str
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload from clients
class AssignShiftPayload(BaseModel):
    worker_id: int = Field(..., ge=1, le=MAX_ID)
    date: dt.date = Field(..., description="Calendar date, YYYY-MM-DD")
    shift_type: Optional[ShiftType] = Field(
        None, description="S1..S5; empty string or null clears the cell"
    )
    model_config = ConfigDict(extra="forbid")

    @field_validator("date", mode="before")
    @classmethod
    def calendar_date_string(cls, v):
        # lax date parsing would also take timestamps and datetime strings
        if isinstance(v, str) and ISO_DATE.match(v):
            return v
        if isinstance(v, dt.date) and not isinstance(v, dt.datetime):
            return v
        raise ValueError("date must be a calendar date string (YYYY-MM-DD)")

    @field_validator("shift_type", mode="before")
    @classmethod
    def empty_means_clear(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


# INTERNAL DTO for the service
class AssignShift(BaseModel):
    worker_id: int
    date: dt.date
    shift_type: Optional[ShiftType] = None


class AssignShiftResult(BaseModel):
    id: Optional[int] = None
    shift_type: Optional[ShiftType] = None
    message: str
