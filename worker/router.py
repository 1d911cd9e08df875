from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from core.database import MAX_ID, get_db
from .schema import WorkerSchema
from . import service

worker_router = APIRouter(prefix="/workers", tags=["Workers"])

# List all workers, ordered by name
@worker_router.get("", response_model=list[WorkerSchema])
def list_workers(db: Session = Depends(get_db)):
    return service.get_workers(db)

# Get worker by id
@worker_router.get("/{worker_id}", response_model=WorkerSchema)
def worker_detail(worker_id: int = Path(..., ge=1, le=MAX_ID), db: Session = Depends(get_db)):
    obj = service.get_worker(db, worker_id)
    if not obj:
        raise HTTPException(status_code=404, detail="worker not found")
    return obj
