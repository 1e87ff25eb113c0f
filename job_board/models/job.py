from sqlalchemy import BigInteger, Boolean, Column, Float, Integer, String, Text

from job_board.core.database import Base


class Job(Base):
    """
    Job posting as stored in the hosted database.

    Timestamps are kept as ISO-8601 strings exactly as written by the API.
    """
    __tablename__ = "jobs"

    # BigInteger on PostgreSQL, plain INTEGER on SQLite so autoincrement works
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    slug = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    type = Column(String, nullable=False)
    location_type = Column(String, nullable=False)
    location = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    salary = Column(Float, nullable=False)
    company_name = Column(String, nullable=False)
    application_email = Column(String, nullable=True)
    application_url = Column(String, nullable=True)
    company_logo_url = Column(String, nullable=True)
    approved = Column(Boolean, nullable=True)

    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    def __repr__(self):
        return f"<Job(id={self.id}, slug='{self.slug}', approved={self.approved})>"
