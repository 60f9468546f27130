"""
Core module containing the catalog object model and base classes.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "Course",
    "Enrollment",
    "CatalogEvent",
    "EMPTY_COURSE",

    # Interfaces
    "CourseCatalog",
    "EventHandler",

    # Enums
    "DuplicatePolicy",
    "CatalogEventType",

    # Exceptions
    "CoursehubException",
    "ConfigurationError",
]
