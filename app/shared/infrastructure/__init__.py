"""
Infrastructure layer package for Plant Care Application.
Provides the database engine and session management.
"""

__all__ = []
