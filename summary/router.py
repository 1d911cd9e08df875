from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from core.database import get_db
from .schema import MonthlySummaryRow
from . import service

summary_router = APIRouter(tags=["Summary"])

# Per-worker shift counts and pay for one month
@summary_router.get("/summary/{year}/{month}", response_model=list[MonthlySummaryRow])
def monthly_summary(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
):
    return service.get_monthly_summary(db, year=year, month=month)

# Rate table used for total_amount
@summary_router.get("/rates", response_model=dict[str, int])
def shift_rates():
    return service.get_rates()
