"""
Storage module
Key-value backends and the whole-collection record store
"""
from .backend import KeyValueBackend, MemoryBackend, JsonFileBackend
from .repository import RecordStore, default_habits

__all__ = ['KeyValueBackend', 'MemoryBackend', 'JsonFileBackend', 'RecordStore', 'default_habits']
