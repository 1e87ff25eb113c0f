import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from job_board.core.database import get_db
from job_board.core.exceptions import MissingParameterError, NotFoundError, StoreError
from job_board.crud import job as job_crud
from job_board.schemas.job import (
    JobApproveResponse,
    JobListResponse,
    JobResponse,
    MessageResponse,
    validate_job_approval,
    validate_job_create,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("", response_model=JobListResponse, summary="Retrieve all jobs")
def list_jobs(db: Session = Depends(get_db)):
    """
    Returns every job posting, unfiltered and unpaginated.
    """
    jobs = job_crud.get_all(db)
    return {"jobs": [JobResponse.model_validate(job) for job in jobs]}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=str, summary="Create a new job posting")
def create_job(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Adds a new job posting with the provided details.

    The payload is validated before anything touches the database. `id` is
    always assigned by the database; `approved`, `created_at` and
    `updated_at` are stored as supplied.
    """
    job_data = validate_job_create(payload)
    job_crud.create(db, job_data)

    logger.info(f"Created job {job_data.slug}")
    return "job created successfully"


@router.get("/{job_id}", response_model=JobResponse, summary="Get a job by ID")
def get_job(job_id: str, db: Session = Depends(get_db)):
    """
    Retrieve details of a specific job by its ID.
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except StoreError:
        job = None

    if not job:
        raise NotFoundError("Job not found")

    return job


@router.put("/{job_id}", response_model=JobApproveResponse, summary="Approve a job by ID")
def approve_job(job_id: str, payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Set `approved` to true on a specific job.

    The body must be exactly `{"approved": true}`. The job returned is the
    existing row with the new `approved` and `updated_at` applied; it is not
    re-read after the update, so a concurrent write to the same job may not
    be reflected.
    """
    if not job_id.strip():
        raise MissingParameterError("ID is required")

    validate_job_approval(payload)

    try:
        existing_job = job_crud.get_by_id(db, job_id)
    except StoreError:
        existing_job = None

    if not existing_job:
        raise NotFoundError(f"Job with ID {job_id} not found")

    updated_job = JobResponse.model_validate(existing_job).model_copy(
        update={"approved": True, "updated_at": _utc_timestamp()}
    )

    try:
        job_crud.update(db, job_id, {"approved": True, "updated_at": updated_job.updated_at})
    except StoreError:
        raise StoreError("Failed to approve job")

    logger.info(f"Approved job {job_id}")
    return {"message": "Job approved successfully", "job": updated_job}


@router.delete("/{job_id}", response_model=MessageResponse, summary="Delete a job by ID")
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """
    Remove a specific job by its ID.

    Any database failure is reported as 404, the same as a missing job.
    """
    try:
        deleted = job_crud.delete(db, job_id)
    except StoreError as e:
        logger.warning(f"Delete of job {job_id} failed, reporting not found: {e.message}")
        raise NotFoundError("Job not found")

    if not deleted:
        raise NotFoundError("Job not found")

    logger.info(f"Deleted job {job_id}")
    return {"message": "Job deleted successfully"}
