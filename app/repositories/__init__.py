"""
Repository package.
Provides data access layer for all entities.
"""
from .base_repository import BaseRepository, to_object_id
from .employee_repository import EmployeeRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "to_object_id",
]
