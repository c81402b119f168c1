"""
Test the client view state machine against the API served by TestClient.
"""
import httpx
import pytest

from app.client.__main__ import run_loop
from app.client.api_client import EmployeeApiClient
from app.client.view import (
    DELETE_ERROR,
    DELETE_PROMPT,
    FETCH_ERROR,
    SAVE_ERROR,
    EmployeeView,
    empty_form,
    format_money,
)


def fill(view, name="Jane Doe", position="Engineer", location="NYC", salary="90000"):
    view.set_field("name", name)
    view.set_field("position", position)
    view.set_field("location", location)
    view.set_field("salary", salary)


@pytest.fixture
def view(client):
    return EmployeeView(EmployeeApiClient(http_client=client))


@pytest.fixture
def html_view():
    """View whose server answers 200 with an HTML page instead of JSON."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
    http_client = httpx.Client(transport=transport, base_url="http://test")
    return EmployeeView(EmployeeApiClient(http_client=http_client))


@pytest.fixture
def offline_view(offline_client):
    return EmployeeView(EmployeeApiClient(http_client=offline_client))


class TestFetch:

    def test_fetch_replaces_list(self, view, client, employee_payload):
        client.post("/api/employeelist", json=employee_payload)

        assert view.fetch_employees() is True

        assert [e["name"] for e in view.employees] == ["Jane Doe"]
        assert view.error == ""
        assert view.loading is False

    def test_fetch_failure_keeps_previous_list(self, offline_view):
        previous = [{"id": "1", "name": "Kept", "position": "P", "location": "L", "salary": 1}]
        offline_view.employees = previous

        assert offline_view.fetch_employees() is False

        assert offline_view.employees == previous
        assert offline_view.error == FETCH_ERROR
        assert offline_view.loading is False


class TestSubmit:

    def test_create_clears_form_and_refreshes(self, view):
        fill(view)

        assert view.submit() is True

        assert view.form == empty_form()
        assert view.editing_id is None
        assert len(view.employees) == 1
        assert view.employees[0]["salary"] == 90000

    def test_edit_then_submit_updates(self, view):
        fill(view)
        view.submit()
        employee = view.employees[0]

        view.start_edit(employee)
        assert view.mode == "editing"
        assert view.form["salary"] == "90000"
        view.set_field("location", "SF")

        assert view.submit() is True

        assert view.mode == "viewing"
        assert len(view.employees) == 1
        assert view.employees[0]["id"] == employee["id"]
        assert view.employees[0]["location"] == "SF"

    def test_failed_save_keeps_state(self, view):
        fill(view)
        view.submit()
        listed = list(view.employees)
        fill(view, name="")

        assert view.submit() is False

        assert view.error == SAVE_ERROR
        assert view.employees == listed
        assert view.form["position"] == "Engineer"
        assert view.loading is False

    def test_cancel_resets_form_and_target(self, view):
        fill(view)
        view.submit()
        view.start_edit(view.employees[0])

        view.cancel()

        assert view.form == empty_form()
        assert view.editing_id is None
        assert view.mode == "viewing"


class TestDelete:

    def test_declined_confirmation_sends_nothing(self, view, employees_collection):
        fill(view)
        view.submit()
        prompts = []
        employees_collection.calls.clear()

        deleted = view.delete(view.employees[0]["id"], lambda prompt: prompts.append(prompt) or False)

        assert deleted is False
        assert prompts == [DELETE_PROMPT]
        assert employees_collection.calls == []
        assert len(view.employees) == 1

    def test_confirmed_delete_refreshes(self, view):
        fill(view)
        view.submit()

        assert view.delete(view.employees[0]["id"], lambda prompt: True) is True

        assert view.employees == []

    def test_delete_unknown_sets_error(self, view):
        fill(view)
        view.submit()
        listed = list(view.employees)

        assert view.delete("ffffffffffffffffffffffff", lambda prompt: True) is False

        assert view.error == DELETE_ERROR
        assert view.employees == listed


class TestNonJsonResponses:

    def test_fetch_sets_error(self, html_view):
        assert html_view.fetch_employees() is False
        assert html_view.error == FETCH_ERROR
        assert html_view.employees == []

    def test_submit_sets_error_and_keeps_form(self, html_view):
        fill(html_view)

        assert html_view.submit() is False

        assert html_view.error == SAVE_ERROR
        assert html_view.form["name"] == "Jane Doe"
        assert html_view.loading is False

    def test_delete_sets_error(self, html_view):
        assert html_view.delete("ffffffffffffffffffffffff", lambda prompt: True) is False
        assert html_view.error == DELETE_ERROR

    def test_loop_keeps_running(self, html_view):
        answers = iter(["list", "quit"])
        output = []

        run_loop(html_view, ask=lambda prompt: next(answers), show=output.append)

        assert sum(FETCH_ERROR in block for block in output) == 2


class TestRender:

    def test_empty_list_message(self, view):
        view.fetch_employees()
        assert "No employees found" in view.render()

    def test_lists_records(self, view):
        fill(view)
        view.submit()

        text = view.render()

        assert "Add New Employee" in text
        assert "Jane Doe | Engineer | NYC | $90,000" in text

    def test_shows_error_and_edit_heading(self, view):
        view.error = SAVE_ERROR
        view.editing_id = "abc"
        text = view.render()
        assert "Edit Employee" in text
        assert SAVE_ERROR in text

    @pytest.mark.parametrize("amount,expected", [
        (90000.0, "90,000"),
        (1234.5, "1,234.5"),
        (0, "0"),
    ])
    def test_format_money(self, amount, expected):
        assert format_money(amount) == expected


class TestTerminalLoop:

    def test_scripted_session(self, view):
        answers = iter([
            "add", "Jane Doe", "Engineer", "NYC", "90000",
            "edit 1", "", "", "SF", "95000",
            "delete 1", "y",
            "quit",
        ])
        output = []

        run_loop(view, ask=lambda prompt: next(answers), show=output.append)

        assert view.employees == []
        assert any("SF | $95,000" in block for block in output)

    def test_end_of_input_stops(self, view):
        def ask(prompt):
            raise EOFError

        run_loop(view, ask=ask, show=lambda text: None)

    def test_unknown_employee_number(self, view):
        answers = iter(["edit 7", "quit"])
        output = []

        run_loop(view, ask=lambda prompt: next(answers), show=output.append)

        assert "No such employee" in output
