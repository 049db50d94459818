"""README section generators."""

from .builder import ContentGenerator

__all__ = ["ContentGenerator"]
