"""High-level services combining the repository and analysis engines."""

from .usage_service import UsageService

__all__ = ["UsageService"]
