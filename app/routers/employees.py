"""
Employees router.
CRUD endpoints for employee records under /api/employeelist.
"""
from fastapi import APIRouter, Depends, Path, status
from typing import List
import logging

from app.api.deps import get_employee_service
from app.services.employee_service import EmployeeService
from app.models.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeResponse,
    EmployeeDeleteResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()


# Every route also answers with a trailing slash
@router.get("/", response_model=List[EmployeeResponse], include_in_schema=False)
@router.get(
    "",
    response_model=List[EmployeeResponse],
    summary="List employees",
    description="Get every employee record"
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service)
):
    """
    List all employees in the store's natural order.

    **Raises:**
    - 503: If the database is not connected
    """
    return await service.list_employees()


@router.get("/{employee_id}/", response_model=EmployeeResponse, include_in_schema=False)
@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get employee",
    description="Get a single employee by ID"
)
async def get_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Get employee details.

    **Raises:**
    - 404: If employee not found or the ID is malformed
    """
    return await service.get_employee(employee_id)


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
    description="Create a new employee record"
)
async def create_employee(
    employee_data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Create a new employee.

    **Request Body:**
    - **name**: Full name
    - **location**: Work location
    - **position**: Job position
    - **salary**: Salary (number)

    **Returns:**
    - The created record with generated `id` and `createdAt`

    **Raises:**
    - 400: If any field is missing or empty
    """
    return await service.create_employee(employee_data)


@router.put("/{employee_id}/", response_model=EmployeeResponse, include_in_schema=False)
@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update employee",
    description="Replace all fields of an employee"
)
async def update_employee(
    employee_data: EmployeeUpdate,
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Update employee. All four fields are replaced together.

    **Raises:**
    - 400: If any field is missing or empty
    - 404: If employee not found
    """
    return await service.update_employee(employee_id, employee_data)


@router.delete("/{employee_id}/", response_model=EmployeeDeleteResponse, include_in_schema=False)
@router.delete(
    "/{employee_id}",
    response_model=EmployeeDeleteResponse,
    summary="Delete employee",
    description="Permanently delete an employee"
)
async def delete_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Delete employee and return a snapshot of the removed record.

    **Raises:**
    - 404: If employee not found
    """
    employee = await service.delete_employee(employee_id)

    return {
        "message": "Employee deleted successfully",
        "employee": employee
    }
