"""
Core dependencies for FastAPI routes.

This package provides dependency injection functions for services
and other cross-cutting concerns.
"""

from app.api.core.dependencies.services import get_crustacean_service

__all__ = ["get_crustacean_service"]
