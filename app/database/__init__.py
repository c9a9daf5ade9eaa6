"""
Database package for the application.
"""

from .base import Base
from .connection import async_session, build_engine, build_session_factory

__all__ = [
    "Base",
    "async_session",
    "build_engine",
    "build_session_factory",
]
