"""
Base repository providing common document-store operations.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.results import UpdateResult

from exceptions import DatabaseError

logger = logging.getLogger(__name__)

D = TypeVar('D', bound=BaseModel)


class BaseRepository(Generic[D]):
    """
    Generic base repository over a single MongoDB collection.

    Documents are validated into Pydantic models on the way out. Driver
    failures other than duplicate keys are wrapped in DatabaseError;
    DuplicateKeyError propagates so subclasses can map it to a domain error.
    """

    def __init__(self, db: Database, collection_name: str, document: Type[D]):
        """
        Initialize the repository.

        Args:
            db: pymongo Database handle
            collection_name: Collection backing this repository
            document: Pydantic model describing stored documents
        """
        self.db = db
        self.collection: Collection = db[collection_name]
        self.document = document

    def find_one(self, query: Dict[str, Any]) -> Optional[D]:
        """
        Retrieve the first document matching a filter.

        Returns:
            Parsed document or None if not found
        """
        raw = self._call("find_one", self.collection.find_one, query)
        return self.document.model_validate(raw) if raw else None

    def find(self, query: Dict[str, Any]) -> List[D]:
        """
        Retrieve all documents matching a filter, in store order.
        """
        raw_documents = self._call("find", lambda q: list(self.collection.find(q)), query)
        return [self.document.model_validate(raw) for raw in raw_documents]

    def insert(self, document: D) -> None:
        """Insert a new document."""
        self._call("insert_one", self.collection.insert_one, document.model_dump(by_alias=True))

    def replace(self, query: Dict[str, Any], document: D) -> UpdateResult:
        """
        Replace the document matching a filter.

        Returns:
            pymongo UpdateResult (matched_count is 0 if nothing matched)
        """
        return self._call("replace_one", self.collection.replace_one, query, document.model_dump(by_alias=True))

    def count(self, query: Dict[str, Any]) -> int:
        """Count documents matching a filter."""
        return self._call("count_documents", self.collection.count_documents, query)

    def exists(self, query: Dict[str, Any]) -> bool:
        """Check if any document matches a filter."""
        return self.count(query) > 0

    def _call(self, operation: str, func, *args):
        try:
            return func(*args)
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            logger.error(f"{self.collection.name}.{operation} failed: {e}", exc_info=True)
            raise DatabaseError(operation, f"{operation} on {self.collection.name} failed: {e}")
