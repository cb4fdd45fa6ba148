"""
Record store - read access to stored district records.

Contract:
- fetch_all() returns every DistrictRecord in the store.
- Filtering by district is done by the caller over the full set; stores
  need not index by name.
- Read failures propagate as exceptions; the query service turns them
  into StoreUnavailable.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from app.config.firebase import get_db
from app.core.settings import settings
from app.models.district import DistrictRecord

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Abstract source of district records."""

    @abstractmethod
    def fetch_all(self) -> List[DistrictRecord]:
        raise NotImplementedError


class InMemoryRecordStore(RecordStore):
    """Fixed list of records. Used by tests and scripts."""

    def __init__(self, records: Optional[Iterable[DistrictRecord]] = None):
        self._records = list(records or [])

    def fetch_all(self) -> List[DistrictRecord]:
        return list(self._records)


class FirestoreRecordStore(RecordStore):
    """
    Reads one collection of flat district documents.

    Works against the real Firestore client and the JSON mock DB alike,
    since both expose collection(name).stream().
    Documents that fail validation are skipped, not fatal.
    """

    def __init__(self, db: Optional[Any] = None, collection: Optional[str] = None):
        self._db = db
        self.collection = collection or settings.DISTRICTS_COLLECTION

    @property
    def db(self):
        if self._db is None:
            self._db = get_db()
        return self._db

    def fetch_all(self) -> List[DistrictRecord]:
        records: List[DistrictRecord] = []
        skipped = 0

        for doc in self.db.collection(self.collection).stream():
            data = doc.to_dict()
            if not data:
                continue
            try:
                records.append(DistrictRecord.from_document(data))
            except (ValidationError, TypeError, ValueError) as e:
                skipped += 1
                logger.warning(f"Skipping invalid district document {doc.id}: {e}")

        logger.info(f"📊 Documents fetched from '{self.collection}': {len(records)} (skipped {skipped})")
        return records


# Global store instance (singleton pattern)
_record_store: Optional[RecordStore] = None


def get_record_store() -> RecordStore:
    """
    Get or create the RecordStore singleton.

    Returns:
        RecordStore: Firestore-backed store (mock DB when USE_MOCK_DB is set)
    """
    global _record_store
    if _record_store is None:
        _record_store = FirestoreRecordStore()
    return _record_store
