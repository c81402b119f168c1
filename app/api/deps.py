"""
FastAPI dependencies for dependency injection.
Handlers get the database handle from the application state instead of a
module-level global, so tests can swap in a fake store.
"""
from fastapi import Depends, Request

from app.database import Database, Collections
from app.repositories.employee_repository import EmployeeRepository
from app.services.employee_service import EmployeeService


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_employee_service(
    database: Database = Depends(get_database)
) -> EmployeeService:
    """Get employee service with injected dependencies."""
    employee_repo = EmployeeRepository(database.get_collection(Collections.EMPLOYEES))
    return EmployeeService(employee_repo)
