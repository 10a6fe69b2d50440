"""
FastAPI Routes.

API 라우트 (REST, JSON)
"""

from . import archive

__all__ = ["archive"]
