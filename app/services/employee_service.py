"""
Employee service.
Business logic for employee records.
"""
from typing import List, Dict, Any
import logging

from app.repositories.employee_repository import EmployeeRepository
from app.exceptions import NotFoundError, validate_required_fields
from app.models.employee import EMPLOYEE_FIELDS, EmployeeBase

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, employee_repo: EmployeeRepository):
        """
        Initialize employee service.

        Args:
            employee_repo: Employee repository instance
        """
        self.employee_repo = employee_repo

    @staticmethod
    def _prepare(employee_data: EmployeeBase) -> Dict[str, Any]:
        """
        Dump and re-check the payload before it reaches the store.

        Raises:
            ValidationError: If a required field is missing or blank
        """
        payload = employee_data.model_dump()
        validate_required_fields(payload, EMPLOYEE_FIELDS)
        return payload

    async def list_employees(self) -> List[Dict[str, Any]]:
        """
        Get all employees.

        Returns:
            List of employee documents in the store's natural order
        """
        return await self.employee_repo.list_employees()

    async def get_employee(self, employee_id: str) -> Dict[str, Any]:
        """
        Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee document

        Raises:
            NotFoundError: If employee not found
        """
        employee = await self.employee_repo.find_by_id(employee_id)

        if not employee:
            raise NotFoundError("Employee", employee_id)

        return employee

    async def create_employee(self, employee_data: EmployeeBase) -> Dict[str, Any]:
        """
        Create a new employee.

        Args:
            employee_data: Employee creation data

        Returns:
            Created employee including generated id and created_at

        Raises:
            ValidationError: If a required field is missing
        """
        payload = self._prepare(employee_data)

        employee = await self.employee_repo.create_employee(payload)

        logger.info(f"✅ Employee created: {employee['id']}")

        return employee

    async def update_employee(
        self,
        employee_id: str,
        employee_data: EmployeeBase
    ) -> Dict[str, Any]:
        """
        Replace all four fields of an employee.

        Args:
            employee_id: Employee ID
            employee_data: New field values

        Returns:
            Updated employee

        Raises:
            ValidationError: If a required field is missing
            NotFoundError: If employee not found
        """
        payload = self._prepare(employee_data)

        employee = await self.employee_repo.replace_employee(employee_id, payload)

        if not employee:
            raise NotFoundError("Employee", employee_id)

        logger.info(f"✅ Employee updated: {employee_id}")

        return employee

    async def delete_employee(self, employee_id: str) -> Dict[str, Any]:
        """
        Hard delete an employee.

        Args:
            employee_id: Employee ID

        Returns:
            Snapshot of the deleted employee

        Raises:
            NotFoundError: If employee not found
        """
        employee = await self.employee_repo.delete(employee_id)

        if not employee:
            raise NotFoundError("Employee", employee_id)

        logger.info(f"🗑️ Employee deleted: {employee_id}")

        return employee
