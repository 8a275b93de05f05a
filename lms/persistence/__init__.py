"""
Persistence module: the in-memory registry and its bootstrap data.
"""

from .registry import Registry
from .seed import seed_registry, SEED_COURSES, SEED_USERS

__all__ = [
    "Registry",
    "seed_registry",
    "SEED_COURSES",
    "SEED_USERS",
]
