"""
Models package.
Pydantic schemas for all entities.
"""
from .employee import (
    EMPLOYEE_FIELDS,
    EmployeeBase,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeDeleteResponse
)

__all__ = [
    "EMPLOYEE_FIELDS",
    "EmployeeBase",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "EmployeeDeleteResponse",
]
