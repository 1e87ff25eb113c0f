"""
Database models package.
"""

from job_board.models.job import Job

__all__ = ["Job"]
