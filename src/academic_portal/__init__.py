"""Academic records portal.

Feature modules (users, subjects, timetable, attendance, marks) each carry a
repository interface with MySQL and in-memory implementations, a service
layer, and a thin Flask JSON controller.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
