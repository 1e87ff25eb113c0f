"""
Pydantic schemas for job postings.

The two request schemas are strict: JSON strings are never coerced into
numbers or booleans, so a payload either has the right shape or is rejected.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from job_board.core.exceptions import ValidationError

_url_adapter = TypeAdapter(AnyUrl)


class JobCreateRequest(BaseModel):
    """Schema for creating a new job posting. A client-supplied id is dropped."""
    model_config = ConfigDict(strict=True)

    slug: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Employment type, e.g. full-time")
    location_type: str = Field(..., min_length=1, description="e.g. remote, onsite, hybrid")
    location: Optional[str] = None
    description: Optional[str] = None
    salary: float = Field(..., ge=0)
    company_name: str = Field(..., min_length=1)
    application_email: Optional[str] = None
    application_url: Optional[str] = None
    company_logo_url: Optional[str] = None
    approved: bool
    created_at: str
    updated_at: str

    @field_validator("application_email")
    @classmethod
    def validate_email_format(cls, v: Optional[str]) -> Optional[str]:
        """Check email syntax without normalizing the stored address"""
        if v is None:
            return v
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}")
        return v

    @field_validator("application_url", "company_logo_url")
    @classmethod
    def validate_url_format(cls, v: Optional[str]) -> Optional[str]:
        """Check URL syntax but keep the caller's string as-is"""
        if v is None:
            return v
        try:
            _url_adapter.validate_python(v)
        except PydanticValidationError:
            raise ValueError("Invalid url")
        return v

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        """Ensure timestamps are ISO-8601"""
        try:
            datetime.fromisoformat(v)
        except ValueError:
            raise ValueError("Must be an ISO-8601 timestamp")
        return v


class JobApprovalRequest(BaseModel):
    """Body of PUT /jobs/{id}: exactly {"approved": true}"""
    model_config = ConfigDict(strict=True, extra="forbid")

    approved: bool

    @field_validator("approved")
    @classmethod
    def validate_approved_true(cls, v: bool) -> bool:
        """Only true is accepted"""
        if v is not True:
            raise ValueError("Expected true")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    slug: str
    title: str
    type: str
    location_type: str
    location: Optional[str] = None
    description: Optional[str] = None
    salary: float
    company_name: str
    application_email: Optional[str] = None
    application_url: Optional[str] = None
    company_logo_url: Optional[str] = None
    approved: Optional[bool] = None
    created_at: str
    updated_at: str

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobListResponse(BaseModel):
    jobs: List[JobResponse]


class JobApproveResponse(BaseModel):
    message: str
    job: JobResponse


class MessageResponse(BaseModel):
    message: str


def _violations(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
        for err in exc.errors()
    ]


def validate_job_create(payload: Any) -> JobCreateRequest:
    """
    Validate a job creation payload.

    Raises:
        ValidationError: With one violation per failing field
    """
    try:
        return JobCreateRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_violations(e))


def validate_job_approval(payload: Any) -> JobApprovalRequest:
    """
    Validate an approval payload.

    Raises:
        ValidationError: Unless the payload is exactly {"approved": true}
    """
    try:
        return JobApprovalRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_violations(e))
