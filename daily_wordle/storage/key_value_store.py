"""
Key-Value Store

String key-value persistence used for stats and "completed today" flags.
The game core never touches a store directly; the session service gets one
injected.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Synchronous get / set / remove over string keys and values."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Returns the value stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Stores ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Deletes ``key``. Missing keys are not an error."""


class InMemoryStore(KeyValueStore):
    """Process-local store. Contents are lost on restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Whole store kept as one JSON object on disk.

    Every write rewrites the file. Reads go to disk too, so several
    processes pointed at the same file see each other's writes.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Store file %s is corrupted, starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold an object, starting empty", self.path)
            return {}
        return data

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)


class MongoKeyValueStore(KeyValueStore):
    """
    Store backed by a MongoDB collection, one document per key:
    ``{"_id": key, "value": value}``.
    """

    def __init__(self, mongo_uri: Optional[str] = None, database: str = "wordle_game",
                 collection: str = "key_value", client: Optional[MongoClient] = None):
        """
        Args:
            mongo_uri: MongoDB connection string, used when no client is given
            database: Database name
            collection: Collection name
            client: Existing client to reuse
        """
        if client is None:
            if not mongo_uri:
                raise ConfigurationError("MONGO_URI is required for the mongo store backend")
            client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            # Test connection
            try:
                client.admin.command('ping')
            except Exception as e:
                logger.error("MongoDB connection error: %s", e)
                raise
            logger.info("Connected to MongoDB for key-value storage")

        self.client = client
        self.collection = client[database][collection]

    def get(self, key: str) -> Optional[str]:
        document = self.collection.find_one({"_id": key})
        if document is None:
            return None
        return document.get("value")

    def set(self, key: str, value: str) -> None:
        self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def remove(self, key: str) -> None:
        self.collection.delete_one({"_id": key})


def create_store(config_class) -> KeyValueStore:
    """
    Builds the store selected by ``STORE_BACKEND`` on a config class.

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    backend = str(getattr(config_class, 'STORE_BACKEND', 'memory')).lower()

    if backend == 'memory':
        return InMemoryStore()
    if backend == 'file':
        return JsonFileStore(getattr(config_class, 'STORE_FILE', 'data/store.json'))
    if backend == 'mongo':
        return MongoKeyValueStore(
            getattr(config_class, 'MONGO_URI', None),
            database=getattr(config_class, 'MONGO_DB', 'wordle_game'),
            collection=getattr(config_class, 'MONGO_COLLECTION', 'key_value'),
        )
    raise ConfigurationError(f"Unknown store backend: {backend}")
