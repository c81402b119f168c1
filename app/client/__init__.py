"""
Client view package.
Form-and-list front-end consuming the employee list API.
"""
from .api_client import EmployeeApiClient
from .view import EmployeeView

__all__ = [
    "EmployeeApiClient",
    "EmployeeView",
]
