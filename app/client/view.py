"""
Employee list view.

Holds the state of the single form-and-list screen and drives the API.
After every successful mutation the full list is fetched again; the list is
never patched locally.
"""
from typing import Any, Callable, Dict, List, Optional
import logging

import httpx

from app.client.api_client import EmployeeApiClient

logger = logging.getLogger(__name__)

FORM_FIELDS = ["name", "position", "location", "salary"]
DELETE_PROMPT = "Are you sure you want to delete this employee?"

FETCH_ERROR = "Failed to fetch employees"
SAVE_ERROR = "Failed to save employee"
DELETE_ERROR = "Failed to delete employee"


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


def format_salary(salary: Any) -> str:
    if isinstance(salary, float) and salary.is_integer():
        return str(int(salary))
    return str(salary)


def format_money(amount: float) -> str:
    """90000.0 -> '90,000'; 1234.5 -> '1,234.5'"""
    text = f"{amount:,.2f}"
    return text.rstrip("0").rstrip(".")


class EmployeeView:
    """State and actions of the employee management screen.

    ``editing_id`` is None while adding and holds a record id while editing.
    """

    def __init__(self, api: EmployeeApiClient):
        self.api = api
        self.employees: List[Dict[str, Any]] = []
        self.form: Dict[str, str] = empty_form()
        self.editing_id: Optional[str] = None
        self.loading = False
        self.error = ""

    @property
    def mode(self) -> str:
        return "editing" if self.editing_id else "viewing"

    def fetch_employees(self) -> bool:
        """
        Replace the list with the server's current records.

        On failure the previous list is kept and a generic error is set.

        Returns:
            True if the list was refreshed
        """
        self.loading = True
        try:
            self.employees = self.api.list_employees()
            self.error = ""
            return True
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching employees: {e}")
            self.error = FETCH_ERROR
            return False
        finally:
            self.loading = False

    def set_field(self, field: str, value: str) -> None:
        if field not in self.form:
            raise KeyError(field)
        self.form[field] = value

    def submit(self) -> bool:
        """
        Save the form: update when editing, create otherwise.

        On success the form and editing target are cleared and the list is
        fetched again. On failure list and form are left untouched.

        Returns:
            True if the record was saved
        """
        self.loading = True
        try:
            if self.editing_id:
                self.api.update_employee(self.editing_id, dict(self.form))
                self.editing_id = None
            else:
                self.api.create_employee(dict(self.form))
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error saving employee: {e}")
            self.error = SAVE_ERROR
            self.loading = False
            return False

        self.form = empty_form()
        self.fetch_employees()
        return True

    def start_edit(self, employee: Dict[str, Any]) -> None:
        """Copy a record into the form and make it the editing target."""
        self.form = {
            "name": employee["name"],
            "position": employee["position"],
            "location": employee["location"],
            "salary": format_salary(employee["salary"]),
        }
        self.editing_id = employee["id"]

    def cancel(self) -> None:
        self.form = empty_form()
        self.editing_id = None

    def delete(self, employee_id: str, confirm: Callable[[str], bool]) -> bool:
        """
        Delete a record after explicit confirmation.

        Args:
            employee_id: ID of the record to delete
            confirm: Called with the prompt; the request is sent only if it
                returns True

        Returns:
            True if the record was deleted
        """
        if not confirm(DELETE_PROMPT):
            return False

        self.loading = True
        try:
            self.api.delete_employee(employee_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error deleting employee: {e}")
            self.error = DELETE_ERROR
            self.loading = False
            return False

        self.fetch_employees()
        return True

    def render(self) -> str:
        """Render heading, error, form and list as plain text."""
        lines = ["Employee Management System", ""]
        lines.append("Edit Employee" if self.editing_id else "Add New Employee")
        if self.error:
            lines.append(f"! {self.error}")
        for field in FORM_FIELDS:
            lines.append(f"  {field.capitalize()}: {self.form[field]}")
        lines.append("")

        lines.append("Employee List")
        if self.loading and not self.employees:
            lines.append("Loading employees...")
        elif not self.employees:
            lines.append("No employees found. Add your first employee above!")
        for number, employee in enumerate(self.employees, start=1):
            created = str(employee.get("createdAt", ""))[:10]
            lines.append(
                f"  {number}. {employee['name']} | {employee['position']} | "
                f"{employee['location']} | ${format_money(employee['salary'])} | created {created}"
            )
        return "\n".join(lines)
