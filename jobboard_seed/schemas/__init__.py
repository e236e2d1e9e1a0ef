"""
Schemas module - document shapes written to MongoDB.

These mirror the job-board app's models by convention; if the app
renames a field, change it here too.
"""
from jobboard_seed.schemas.schemas import (
    UserRole,
    JobType,
    ApplicationStatus,
    UserDocument,
    CompanyDocument,
    JobDocument,
    ApplicationDocument
)

__all__ = [
    "UserRole",
    "JobType",
    "ApplicationStatus",
    "UserDocument",
    "CompanyDocument",
    "JobDocument",
    "ApplicationDocument"
]
