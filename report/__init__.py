"""Report model for collected dependencies."""

from .model import DependencyReport

__all__ = ["DependencyReport"]
