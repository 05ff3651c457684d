"""Route handlers for the API."""

from resume_paginator.api.routes import health, pagination

__all__ = [
    "health",
    "pagination",
]
