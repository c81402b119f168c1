"""
Server entry point.
Runs the FastAPI application from main.py with uvicorn.

Command: python -m app.server (or the employee-records console script)
"""
import uvicorn

from app.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
