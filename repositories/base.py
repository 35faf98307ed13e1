"""
Base repository for the collection store.
Each repository owns one key and reads/writes the whole JSON document behind it.
"""

import logging
from typing import Any, Callable, Generic, Optional, TypeVar
from abc import ABC

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from domain.models import StoredCollection

CollectionType = TypeVar("CollectionType")

logger = logging.getLogger("platepilot.repositories")


class CollectionRepository(Generic[CollectionType], ABC):
    """
    Whole-collection read/modify/write over ``stored_collection``.

    Subclasses set ``key``, ``collection_type`` and ``default_factory``.
    """

    key: str
    collection_type: Any
    default_factory: Callable[[], CollectionType]

    def __init__(self, db: Session):
        self.db = db
        self._adapter = TypeAdapter(self.collection_type)

    def _row(self) -> Optional[StoredCollection]:
        # Always re-read: another session may have replaced the document
        return self.db.get(StoredCollection, self.key, populate_existing=True)

    def load(self) -> CollectionType:
        """
        Load the collection.

        Returns:
            The stored value, or the default when nothing is stored or the
            stored document cannot be decoded
        """
        row = self._row()
        if row is None:
            return self.default_factory()
        try:
            return self._adapter.validate_json(row.payload)
        except ValidationError as e:
            logger.warning(
                "Could not decode stored %s, using default: %s", self.key, e
            )
            return self.default_factory()

    def save(self, value: CollectionType) -> CollectionType:
        """Replace the stored document with ``value``"""
        payload = self._adapter.dump_json(value).decode("utf-8")
        row = self._row()
        if row is None:
            self.db.add(StoredCollection(key=self.key, payload=payload))
        else:
            row.payload = payload
        self.db.commit()
        return value

    def clear(self) -> bool:
        """Delete the stored document. Returns True if one existed."""
        row = self._row()
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True

    def exists(self) -> bool:
        """Check if a document is stored for this collection"""
        return self._row() is not None
