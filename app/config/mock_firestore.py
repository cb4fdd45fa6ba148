"""
JSON-file mock of the small Firestore surface this service uses.

Layout of the backing file:
    {"<collection>": {"<doc_id>": {...fields...}}}

Supported calls mirror firebase_admin's client:
    db.collection(name).stream()
    db.collection(name).document(doc_id).set(data) / .get()
    db.collections()
"""

import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class MockDocumentSnapshot:
    def __init__(self, doc_id: str, data: Optional[Dict[str, Any]]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[Dict[str, Any]]:
        return dict(self._data) if self._data is not None else None


class MockDocumentReference:
    def __init__(self, store: "MockFirestore", collection: str, doc_id: str):
        self._store = store
        self._collection = collection
        self.id = doc_id

    def get(self) -> MockDocumentSnapshot:
        data = self._store._data.get(self._collection, {}).get(self.id)
        return MockDocumentSnapshot(self.id, data)

    def set(self, data: Dict[str, Any]) -> None:
        self._store._data.setdefault(self._collection, {})[self.id] = dict(data)
        self._store._flush()


class MockCollectionReference:
    def __init__(self, store: "MockFirestore", name: str):
        self._store = store
        self.id = name

    def document(self, doc_id: Optional[str] = None) -> MockDocumentReference:
        return MockDocumentReference(self._store, self.id, doc_id or uuid.uuid4().hex)

    def stream(self) -> Iterator[MockDocumentSnapshot]:
        for doc_id, data in list(self._store._data.get(self.id, {}).items()):
            yield MockDocumentSnapshot(doc_id, data)


class MockFirestore:
    """
    In-process Firestore stand-in persisted to a JSON file.

    Pass path=None for a purely in-memory database (tests).
    """

    def __init__(self, path: Optional[str] = None, data: Optional[Dict[str, Dict[str, Any]]] = None):
        self.path = path
        self._data: Dict[str, Dict[str, Any]] = data if data is not None else self._load()

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if not self.path or not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _flush(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)

    def collection(self, name: str) -> MockCollectionReference:
        return MockCollectionReference(self, name)

    def collections(self) -> List[MockCollectionReference]:
        return [MockCollectionReference(self, name) for name in self._data]


def get_mock_db(path: str) -> MockFirestore:
    if not os.path.exists(path):
        logger.warning(f"[MOCK DB] {path} not found, starting with an empty database")
    return MockFirestore(path)
