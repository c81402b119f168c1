"""
Employee models.
Pydantic schemas for employee records.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

EMPLOYEE_FIELDS = ["name", "location", "position", "salary"]


class EmployeeBase(BaseModel):
    """Base employee fields. All four are required."""
    name: str = Field(..., min_length=1, description="Full name")
    location: str = Field(..., min_length=1, description="Work location")
    position: str = Field(..., min_length=1, description="Job position")
    salary: float = Field(..., allow_inf_nan=False, description="Salary")

    model_config = ConfigDict(str_strip_whitespace=True)


class EmployeeCreate(EmployeeBase):
    """Employee creation request."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class EmployeeUpdate(EmployeeBase):
    """Employee update request. Replaces all four fields together."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class EmployeeResponse(EmployeeBase):
    """Employee response model."""
    id: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class EmployeeDeleteResponse(BaseModel):
    """Delete confirmation with a snapshot of the removed record."""
    message: str
    employee: EmployeeResponse
