"""
Employee repository.
Data access layer for employee operations.
"""
from typing import List, Dict, Any, Optional
import logging

from .base_repository import BaseRepository
from app.models.employee import EMPLOYEE_FIELDS

logger = logging.getLogger(__name__)


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""

    @staticmethod
    def _fields(employee_data: Dict[str, Any]) -> Dict[str, Any]:
        return {field: employee_data[field] for field in EMPLOYEE_FIELDS}

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new employee document.

        Args:
            employee_data: name, location, position, salary

        Returns:
            Created employee with generated ``id`` and ``created_at``
        """
        logger.info(f"Creating employee: {employee_data.get('name')}")
        return await self.create(self._fields(employee_data))

    async def list_employees(self) -> List[Dict[str, Any]]:
        """Return every employee in the collection's natural order."""
        return await self.find_all()

    async def replace_employee(
        self,
        employee_id: str,
        employee_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Replace all four employee fields at once.

        Args:
            employee_id: Employee ID
            employee_data: name, location, position, salary

        Returns:
            Updated employee or None if not found
        """
        return await self.update(employee_id, self._fields(employee_data))
