"""Card-selection strategies for computer players."""

from .base import Strategy
from .first_match import FirstMatchStrategy

__all__ = ["Strategy", "FirstMatchStrategy"]
