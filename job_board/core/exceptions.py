"""
Domain exceptions for the job board API.

Route handlers raise these; the exception handlers registered in main.py
turn them into JSON responses of the form {"error": ...}.
"""

from typing import Any, Dict, List


class JobBoardError(Exception):
    """Base class for errors that map to an HTTP response"""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(JobBoardError):
    """
    Payload failed schema validation.

    Carries the field-level violations so the caller can see every
    problem at once, not just the first one.
    """
    status_code = 400

    def __init__(self, violations: List[Dict[str, Any]], message: str = "Validation failed"):
        super().__init__(message)
        self.violations = violations

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.violations}


class NotFoundError(JobBoardError):
    """No row matched the requested identifier"""
    status_code = 404


class StoreError(JobBoardError):
    """The database rejected the query or could not be reached"""
    status_code = 500


class MissingParameterError(JobBoardError):
    """A required path parameter was empty"""
    status_code = 400


class ConfigurationError(Exception):
    """Required configuration is missing; raised at startup"""
