"""Store implementations."""

from .base import OptionsStore, OptionTableStore, TransientStore
from .disk import DiskStore
from .memory import MemoryStore

__all__ = ["DiskStore", "MemoryStore", "OptionTableStore", "OptionsStore", "TransientStore"]
