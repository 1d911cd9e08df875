import logging
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from .models import Worker
from .schema import WorkerCreate

logger = logging.getLogger(__name__)

DEFAULT_WORKER_NAMES = (
    "John Doe", "Jane Smith", "Mike Johnson", "Sarah Wilson", "David Brown",
    "Lisa Davis", "Tom Miller", "Emma Garcia", "Chris Rodriguez", "Anna Martinez",
    "Kevin Lee", "Maria Taylor", "James Anderson", "Sophia Thomas", "Robert Jackson",
)

def default_workers() -> List[WorkerCreate]:
    return [
        WorkerCreate(name=name, code=f"EMP{index:03d}")
        for index, name in enumerate(DEFAULT_WORKER_NAMES, start=1)
    ]

def get_workers(db: Session) -> List[Worker]:
    statement = select(Worker).order_by(Worker.name.asc(), Worker.id.asc())
    return list(db.scalars(statement))

def get_worker(db: Session, worker_id: int) -> Optional[Worker]:
    return db.get(Worker, worker_id)

def create_workers(db: Session, workers: Sequence[WorkerCreate]) -> List[Worker]:
    rows = [Worker(name=w.name, code=w.code) for w in workers]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows

def seed_default_workers(db: Session) -> int:
    """
    Insert the default roster when the workers table is empty.
    Returns the number of workers inserted (0 if the table already had rows).
    """
    existing = db.scalar(select(func.count()).select_from(Worker))
    if existing:
        return 0
    rows = create_workers(db, default_workers())
    logger.info("seeded %d default workers", len(rows))
    return len(rows)
