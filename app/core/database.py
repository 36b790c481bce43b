"""
Document store client.

`DocumentStore` owns the MongoDB client for the whole process. It is
constructed explicitly, opened once at startup, handed to every
repository, and closed at shutdown. No module-level connection state.
"""

import logging
from typing import Optional, Sequence

from beanie import Document, init_beanie
from pymongo import AsyncMongoClient

from app.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class DocumentStore:
    """MongoDB client plus ODM registration for a fixed set of documents.

    Args:
        uri: MongoDB connection string.
        database_name: Database holding the collections.
        document_models: Beanie document classes to register.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        document_models: Sequence[type[Document]],
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._document_models = list(document_models)
        self._client: Optional[AsyncMongoClient] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> None:
        """Connect and register the documents (creates declared indexes)."""
        if self._client is not None:
            return
        client: AsyncMongoClient = AsyncMongoClient(self._uri, tz_aware=True)
        try:
            await init_beanie(
                database=client[self._database_name],
                document_models=self._document_models,
            )
        except Exception:
            await client.close()
            raise
        self._client = client
        logger.info("Document store connected (database=%s)", self._database_name)

    async def close(self) -> None:
        """Release the client. Safe to call when already closed."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.close()
        logger.info("Document store disconnected")

    def ensure_open(self) -> None:
        """Raise StoreUnavailableError unless the store has been opened."""
        if self._client is None:
            raise StoreUnavailableError()
