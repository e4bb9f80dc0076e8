"""
Measure Store
=============

The only code that talks to MongoDB.

WHAT IT DOES:
------------
1. save()       - insert one {"value", "date"} document
2. read()       - find documents newer than a cutoff (max 100, no _id)
3. delete_all() - empty the collection
4. ping()       - health check for /health

CONNECTIONS:
-----------
One MongoClient per process. The client IS the driver's connection pool, so
it is created at startup and closed at shutdown. Every operation checks out
a session inside a `with` block, so the session goes back to the pool on
every exit path, even when the operation raises.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Union

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from sensor_gateway.config import Config

logger = logging.getLogger(__name__)


# Reads never return more than this many documents
READ_LIMIT = 100

MIN_POOL_SIZE = 5


class MeasureStore:
    """
    MongoDB access for sensor measurements.

    Args:
        config: Gateway configuration (connection string, database, collection)
        client: Already-built MongoClient. Built from config when omitted.
    """

    def __init__(self, config: Config, client: Optional[MongoClient] = None):
        self.config = config
        self._client = client if client is not None else self.connect(config)

    @staticmethod
    def connect(config: Config) -> MongoClient:
        """Create the process-wide client (Stable API v1, strict)."""
        return MongoClient(
            config.mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            minPoolSize=MIN_POOL_SIZE,
            tz_aware=True,
        )

    @property
    def collection(self) -> Collection:
        return self._client[self.config.database][self.config.collection]

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def save(self, measure_value: Union[str, int, float]) -> bool:
        """
        Store one measurement stamped with the current server time.

        Args:
            measure_value: The measure as the client sent it

        Returns:
            True if MongoDB acknowledged the insert

        Raises:
            PyMongoError: If the database is unreachable or rejects the write
        """
        document = {"value": measure_value, "date": datetime.now(timezone.utc)}
        with self._client.start_session() as session:
            result = self.collection.insert_one(document, session=session)
        logger.debug(f"Saved measure {measure_value!r}")
        return bool(result.acknowledged)

    def read(self, cutoff: datetime) -> list[dict[str, Any]]:
        """
        Get measurements with date >= cutoff.

        No sort is applied; documents come back in natural order.

        Args:
            cutoff: Oldest date to include

        Returns:
            Up to READ_LIMIT documents without their _id (empty list if none)
        """
        with self._client.start_session() as session:
            cursor = self.collection.find(
                {"date": {"$gte": cutoff}},
                projection={"_id": 0},
                limit=READ_LIMIT,
                session=session,
            )
            measures = list(cursor)
        logger.debug(f"Read {len(measures)} measures since {cutoff.isoformat()}")
        return measures

    def delete_all(self) -> bool:
        """
        Delete every measurement in the collection.

        Returns:
            True if MongoDB acknowledged the delete
        """
        with self._client.start_session() as session:
            result = self.collection.delete_many({}, session=session)
        logger.info(f"Deleted {result.deleted_count if result.acknowledged else 0} measures")
        return bool(result.acknowledged)

    def ping(self) -> bool:
        """Check that the database answers. Never raises."""
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database ping failed: {e}")
            return False

    def close(self) -> None:
        """Close the client and its pool (process shutdown)."""
        self._client.close()
