"""
Routers Package
===============

Routers direct incoming requests to the right handler.
"""

from .measures import router as measures_router, get_measure_store

__all__ = [
    "measures_router",
    "get_measure_store",
]
