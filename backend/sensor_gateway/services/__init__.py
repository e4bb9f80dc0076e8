"""
Services Package
================

The code that does the actual work.

- MeasureStore: Saves, reads and deletes measurements in MongoDB
"""

from .measure_store import MeasureStore, READ_LIMIT

__all__ = [
    "MeasureStore",
    "READ_LIMIT",
]
