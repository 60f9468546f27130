"""
Services module containing the catalog implementations.
"""

from .catalog_service import InMemoryCourseCatalog, create_catalog

__all__ = [
    "InMemoryCourseCatalog",
    "create_catalog",
]
