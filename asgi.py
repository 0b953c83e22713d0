"""
asgi.py -- ASGI entry point.

Run with:  uvicorn asgi:app --reload
           PORT=8000 uvicorn asgi:app --port 8000

Set PORT to the port uvicorn listens on: verification links built for
localhost requests embed it.
"""

from api.main import app

__all__ = ["app"]
