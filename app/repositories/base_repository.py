"""
Base repository with generic CRUD operations for MongoDB.
All entity-specific repositories should inherit from this.
"""
from typing import Optional, List, Dict, Any, Generic, TypeVar
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import ConnectionFailure, PyMongoError
from datetime import datetime, timezone
import logging

from app.exceptions import DatabaseError, ServiceUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def to_object_id(doc_id: Any) -> Optional[ObjectId]:
    """
    Convert a string ID to ObjectId.

    Returns:
        ObjectId, or None if the value is not a valid ObjectId
    """
    if isinstance(doc_id, ObjectId):
        return doc_id
    # ObjectId(None) would mint a new id
    if not isinstance(doc_id, str):
        return None
    try:
        return ObjectId(doc_id)
    except InvalidId:
        return None


class BaseRepository(Generic[T]):
    """
    Generic repository for MongoDB CRUD operations.

    Provides standard methods: create, find_by_id, find_all, update, delete.
    Driver errors are translated into application errors.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    @staticmethod
    def _serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Expose ``_id`` as a string ``id``."""
        if document and '_id' in document:
            document['id'] = str(document.pop('_id'))
        return document

    def _driver_error(self, operation: str, error: PyMongoError) -> Exception:
        """Map a pymongo error to the matching application error."""
        logger.error(f"❌ {operation} failed on {self.collection.name}: {error}")
        if isinstance(error, ConnectionFailure):
            return ServiceUnavailableError(
                "Database not reachable",
                details={"operation": operation}
            )
        return DatabaseError(str(error), details={"operation": operation})

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            document: Document data

        Returns:
            Created document including ``id`` and ``created_at``
        """
        document = dict(document)
        document['created_at'] = datetime.now(timezone.utc)
        document['updated_at'] = None

        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._driver_error("insert", e) from e

        document['_id'] = result.inserted_id
        logger.info(f"Created document in {self.collection.name}: {result.inserted_id}")
        return self._serialize(document)

    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Args:
            doc_id: Document ID (string or ObjectId)

        Returns:
            Document data or None if not found or the ID is malformed
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._driver_error("find", e) from e

        return self._serialize(document)

    async def find_all(
        self,
        filter_query: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents matching filter, in natural order.

        Args:
            filter_query: MongoDB filter query (None for all documents)

        Returns:
            List of documents
        """
        query = filter_query or {}
        try:
            documents = await self.collection.find(query).to_list(length=None)
        except PyMongoError as e:
            raise self._driver_error("find", e) from e

        return [self._serialize(doc) for doc in documents]

    async def update(
        self,
        doc_id: str,
        update_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Update document by ID.

        Args:
            doc_id: Document ID
            update_data: Fields to set

        Returns:
            The updated document, or None if no document has this ID
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None

        update_data = dict(update_data)
        update_data.pop('created_at', None)
        update_data['updated_at'] = datetime.now(timezone.utc)

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise self._driver_error("update", e) from e

        if document:
            logger.info(f"Updated document in {self.collection.name}: {doc_id}")
        return self._serialize(document)

    async def delete(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete document by ID.

        Args:
            doc_id: Document ID

        Returns:
            Snapshot of the deleted document, or None if not found
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None

        try:
            document = await self.collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            raise self._driver_error("delete", e) from e

        if document:
            logger.info(f"Deleted document from {self.collection.name}: {doc_id}")
        return self._serialize(document)
