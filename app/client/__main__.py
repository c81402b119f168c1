"""
Terminal front-end for the employee list.

Usage: python -m app.client [--base-url http://localhost:3000]

Commands: list, add, edit N, delete N, cancel, quit
"""
import argparse
from typing import Callable, List, Optional

from app.client.api_client import DEFAULT_BASE_URL, EmployeeApiClient
from app.client.view import FORM_FIELDS, EmployeeView

HELP = "Commands: list | add | edit N | delete N | cancel | quit"


def _pick(view: EmployeeView, argument: str) -> Optional[dict]:
    try:
        index = int(argument) - 1
    except ValueError:
        return None
    if 0 <= index < len(view.employees):
        return view.employees[index]
    return None


def _fill_form(view: EmployeeView, ask: Callable[[str], str]) -> None:
    for field in FORM_FIELDS:
        current = view.form[field]
        suffix = f" [{current}]" if current else ""
        value = ask(f"{field.capitalize()}{suffix}: ").strip()
        if value:
            view.set_field(field, value)


def run_loop(view: EmployeeView, ask: Callable[[str], str] = input, show: Callable[[str], None] = print) -> None:
    """Read commands until ``quit`` or end of input."""
    view.fetch_employees()
    show(view.render())
    show(HELP)

    while True:
        try:
            line = ask("> ").strip()
        except EOFError:
            break
        command, _, argument = line.partition(" ")

        if command == "quit":
            break
        elif command == "list":
            view.fetch_employees()
        elif command == "add":
            view.cancel()
            _fill_form(view, ask)
            view.submit()
        elif command == "edit":
            employee = _pick(view, argument)
            if employee is None:
                show("No such employee")
                continue
            view.start_edit(employee)
            _fill_form(view, ask)
            view.submit()
        elif command == "delete":
            employee = _pick(view, argument)
            if employee is None:
                show("No such employee")
                continue
            view.delete(employee["id"], lambda prompt: ask(f"{prompt} [y/N] ").strip().lower() == "y")
        elif command == "cancel":
            view.cancel()
        else:
            show(HELP)
            continue

        show(view.render())


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Employee Management System client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API service URL")
    args = parser.parse_args(argv)

    api = EmployeeApiClient(base_url=args.base_url)
    try:
        run_loop(EmployeeView(api))
    finally:
        api.close()


if __name__ == "__main__":
    main()
