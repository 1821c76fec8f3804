"""Storage backends for users, posts and comments."""

from .base import Storage
from .memory import MemoryStorage, get_memory_storage
from .sql import SqlStorage

__all__ = ["Storage", "MemoryStorage", "SqlStorage", "get_memory_storage"]
