"""Pydantic schemas for student records."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class StudentBase(BaseModel):
    """Base schema for student data."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    grade: str = Field(..., min_length=1, max_length=20)
    school: str = Field(..., min_length=1, max_length=150)


class StudentCreate(StudentBase):
    """Schema for creating a student."""
    pass


class StudentUpdate(StudentBase):
    """Schema for replacing a student's editable fields."""
    pass


class StudentResponse(StudentBase):
    """Student as returned by the backend."""

    id: int | None = None
    created_at: datetime | None = Field(None, alias="createdAt")


# Entity attribute -> backend query parameter
STUDENT_FILTER_PARAMS = {
    "name": "name",
    "grade": "grade",
    "school": "school",
}

STUDENT_SORT_PARAMS = {
    "id": "id",
    "name": "name",
    "grade": "grade",
    "school": "school",
    "created_at": "createdAt",
}
