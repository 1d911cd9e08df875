from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Mapping

from sqlalchemy.orm import Session

from assignment.models import ShiftType
from assignment import service as assignment_service
from worker import service as worker_service
from .schema import MonthlySummaryRow

# pay per shift, in whole currency units
SHIFT_RATES: Dict[ShiftType, int] = {
    ShiftType.S1: 400,
    ShiftType.S2: 300,
    ShiftType.S3: 900,
    ShiftType.S4: 500,
    ShiftType.S5: 600,
}


def _recognized(tag) -> ShiftType | None:
    try:
        return ShiftType(tag)
    except ValueError:
        return None


def summarize_month(
    workers: Iterable,
    assignments: Iterable,
    rates: Mapping[ShiftType, int] = SHIFT_RATES,
) -> List[MonthlySummaryRow]:
    """
    Fold one month of assignments into a row per worker.

    - every worker gets a row, even with no assignments
    - tags outside S1..S5 count toward nothing, including total_shifts
    - assignments for workers not in `workers` are ignored
    - rows are ordered by worker name, then id
    """
    workers = sorted(workers, key=lambda w: (w.name, w.id))
    counts: Dict[int, Counter] = {w.id: Counter() for w in workers}

    for a in assignments:
        bucket = counts.get(a.worker_id)
        tag = _recognized(a.shift_type)
        if bucket is None or tag is None:
            continue
        bucket[tag] += 1

    rows = []
    for w in workers:
        c = counts[w.id]
        rows.append(
            MonthlySummaryRow(
                worker_id=w.id,
                name=w.name,
                code=w.code,
                total_shifts=sum(c[t] for t in ShiftType),
                s1_count=c[ShiftType.S1],
                s2_count=c[ShiftType.S2],
                s3_count=c[ShiftType.S3],
                s4_count=c[ShiftType.S4],
                s5_count=c[ShiftType.S5],
                total_amount=sum(c[t] * rates.get(t, 0) for t in ShiftType),
            )
        )
    return rows


def get_monthly_summary(db: Session, *, year: int, month: int) -> List[MonthlySummaryRow]:
    assignments = assignment_service.get_assignments_for_month(db, year=year, month=month)
    workers = worker_service.get_workers(db)
    return summarize_month(workers, assignments)


def get_rates() -> Dict[str, int]:
    return {t.value: amount for t, amount in SHIFT_RATES.items()}
