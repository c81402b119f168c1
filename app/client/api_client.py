"""
HTTP client for the employee list API.
"""
from typing import Any, Dict, List, Optional
import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"
EMPLOYEES_PATH = "/api/employeelist"


class EmployeeApiClient:
    """Thin wrapper over the five /api/employeelist endpoints.

    Every method raises ``httpx.HTTPError`` on transport errors and non-2xx
    responses.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0
    ):
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, path, **kwargs)
        response.raise_for_status()
        return response.json()

    def list_employees(self) -> List[Dict[str, Any]]:
        return self._request("GET", EMPLOYEES_PATH)

    def get_employee(self, employee_id: str) -> Dict[str, Any]:
        return self._request("GET", f"{EMPLOYEES_PATH}/{employee_id}")

    def create_employee(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", EMPLOYEES_PATH, json=payload)

    def update_employee(self, employee_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"{EMPLOYEES_PATH}/{employee_id}", json=payload)

    def delete_employee(self, employee_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"{EMPLOYEES_PATH}/{employee_id}")

    def close(self) -> None:
        self.http.close()
