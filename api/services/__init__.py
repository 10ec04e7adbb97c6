"""
API Services - Business logic for the NamAstra API.

Services encapsulate the pipeline runs that routers expose.
"""

from .search_service import NameSearchService

__all__ = [
    "NameSearchService",
]
