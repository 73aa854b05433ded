"""
Persistence layer: keyed entity collections and their registry.
"""

from .collection import Collection
from .registry import Repositories

__all__ = ["Collection", "Repositories"]
