"""Job application tracker board (per-user CRUD)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_tracker_store
from models.requests import TrackerJobCreate, TrackerJobUpdate
from models.responses import DeleteResponse, TrackerJobEnvelope, TrackerJobList
from services.tracker_store import TrackerError, TrackerStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tracker", tags=["tracker"])


@router.get("/jobs", response_model=TrackerJobList)
def list_jobs(
    user_id: str = Query(""),
    store: TrackerStore = Depends(get_tracker_store),
):
    if not user_id:
        raise HTTPException(status_code=400, detail="user_id is required.")
    try:
        return TrackerJobList(jobs=store.list_jobs(user_id))
    except TrackerError:
        raise HTTPException(status_code=500, detail="Failed to load tracker jobs.")


@router.post("/jobs", response_model=TrackerJobEnvelope, status_code=201)
def create_job(body: TrackerJobCreate, store: TrackerStore = Depends(get_tracker_store)):
    if not body.user_id:
        raise HTTPException(status_code=400, detail="user_id is required.")
    try:
        job = store.create_job(**body.model_dump())
    except TrackerError:
        raise HTTPException(status_code=500, detail="Failed to save tracker job.")
    return TrackerJobEnvelope(job=job)


@router.patch("/jobs/{job_id}", response_model=TrackerJobEnvelope)
def update_job(
    job_id: str,
    body: TrackerJobUpdate,
    store: TrackerStore = Depends(get_tracker_store),
):
    try:
        job = store.update_job(job_id, body.model_dump(exclude_unset=True))
    except TrackerError:
        raise HTTPException(status_code=500, detail="Failed to update tracker job.")
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found.")
    return TrackerJobEnvelope(job=job)


@router.delete("/jobs/{job_id}", response_model=DeleteResponse)
def delete_job(job_id: str, store: TrackerStore = Depends(get_tracker_store)):
    try:
        store.delete_job(job_id)
    except TrackerError:
        raise HTTPException(status_code=500, detail="Failed to delete tracker job.")
    return DeleteResponse(success=True)
