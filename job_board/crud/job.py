"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs. Each function is a single round trip to the database; any
SQLAlchemy failure is rolled back and re-raised as StoreError so the API
layer never has to know about the driver.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sql_delete
from sqlalchemy import select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from job_board.core.exceptions import StoreError
from job_board.models.job import Job
from job_board.schemas.job import JobCreateRequest

logger = logging.getLogger(__name__)


BIGINT_MIN = -2**63
BIGINT_MAX = 2**63 - 1


def _parse_id(job_id: str) -> int:
    """Convert a path identifier to the integer primary key."""
    try:
        pk = int(str(job_id).strip())
    except ValueError:
        raise StoreError(f'invalid input syntax for type bigint: "{job_id}"')

    if not BIGINT_MIN <= pk <= BIGINT_MAX:
        raise StoreError(f'value "{job_id}" is out of range for type bigint')
    return pk


def _store_error(db: Session, exc: SQLAlchemyError) -> StoreError:
    db.rollback()
    # Prefer the driver's own message over SQLAlchemy's wrapper text
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Database error: {message}")
    return StoreError(message)


def get_all(db: Session) -> List[Job]:
    """
    Retrieve every job, in whatever order the database returns them.

    Args:
        db: Database session

    Returns:
        List of Job instances
    """
    try:
        return list(db.scalars(select(Job)).all())
    except SQLAlchemyError as e:
        raise _store_error(db, e)


def get_by_id(db: Session, job_id: str) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Args:
        db: Database session
        job_id: Job ID as it appeared in the request path

    Returns:
        Job instance if found, None otherwise
    """
    pk = _parse_id(job_id)
    try:
        return db.scalars(select(Job).where(Job.id == pk)).first()
    except SQLAlchemyError as e:
        raise _store_error(db, e)


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Insert a new job. The id is assigned by the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance. It is expired by the commit, so reading
        its attributes costs another query.
    """
    db_job = Job(**job_data.model_dump())
    try:
        db.add(db_job)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, e)

    return db_job


def update(db: Session, job_id: str, values: Dict[str, Any]) -> int:
    """
    Update only the given columns of one job.

    Args:
        db: Database session
        job_id: Job ID to update
        values: Column name to new value

    Returns:
        Number of rows matched
    """
    pk = _parse_id(job_id)
    try:
        result = db.execute(sql_update(Job).where(Job.id == pk).values(**values))
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, e)

    return result.rowcount


def delete(db: Session, job_id: str) -> int:
    """
    Delete a job by ID without reading it first.

    Args:
        db: Database session
        job_id: Job ID to delete

    Returns:
        Number of rows deleted (0 if no job had that ID)
    """
    pk = _parse_id(job_id)
    try:
        result = db.execute(sql_delete(Job).where(Job.id == pk))
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, e)

    return result.rowcount
