"""Infrastructure layer: persistence adapters for the domain."""

from .mapper import Mapper

__all__ = ["Mapper"]
