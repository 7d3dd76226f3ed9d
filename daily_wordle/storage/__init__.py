"""
Storage Package

Key-value persistence backends.
"""

from .key_value_store import (
    InMemoryStore, JsonFileStore, KeyValueStore, MongoKeyValueStore, create_store,
)

__all__ = ['InMemoryStore', 'JsonFileStore', 'KeyValueStore', 'MongoKeyValueStore', 'create_store']
