"""
Pydantic Schemas - Document shapes for the job-board collections.

Field aliases are the exact keys the job-board app reads from MongoDB
(camelCase in places), so always dump with by_alias=True.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, NonNegativeFloat, NonNegativeInt
from typing import List, Union
from enum import Enum
from bson import ObjectId


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    recruiter = "recruiter"


class JobType(str, Enum):
    full_time = "Full-time"
    part_time = "Part-time"
    internship = "Internship"


class ApplicationStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class DocumentModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_default=True
    )

    def to_document(self) -> dict:
        """Dict ready for insert_many (wire field names, raw ObjectIds)."""
        return self.model_dump(by_alias=True)


# ============================================================
# USER
# ============================================================

class UserDocument(DocumentModel):
    fullname: str = Field(..., min_length=1)
    email: EmailStr
    phone_number: int = Field(..., alias="phoneNumber", ge=0)
    password: str  # bcrypt hash, never plaintext
    role: UserRole


# ============================================================
# COMPANY
# ============================================================

class CompanyDocument(DocumentModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    website: str = ""
    location: str = ""
    user_id: ObjectId = Field(..., alias="userId")


# ============================================================
# JOB
# ============================================================

class JobDocument(DocumentModel):
    title: str = Field(..., min_length=1)
    description: str
    requirements: List[str] = []
    salary: Union[NonNegativeInt, NonNegativeFloat]
    experience_level: int = Field(..., alias="experienceLevel", ge=0)
    location: str
    job_type: JobType = Field(..., alias="jobType")
    position: int = Field(..., ge=1)
    company: ObjectId
    created_by: ObjectId


# ============================================================
# APPLICATION
# ============================================================

class ApplicationDocument(DocumentModel):
    job: ObjectId
    applicant: ObjectId
    status: ApplicationStatus = ApplicationStatus.pending
