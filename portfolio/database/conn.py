from motor.motor_asyncio import AsyncIOMotorClient
from typing import Optional
from config import database_config
from portfolio.utils.errors import StorageUnavailableError
from portfolio.utils.logger_utils import logger


class MongoDBClient:
    """Process-wide handle on the portfolio database.

    Services resolve ``database`` per call, so tests can ``bind`` an
    in-memory client before any request is made.
    """

    def __init__(self, uri: str, db_name: str, timeout_ms: int):
        self._uri = uri
        self._db_name = db_name
        self._timeout_ms = timeout_ms
        self._client = None
        self._db = None

    async def connect(self):
        if self._client is None:
            self.bind(AsyncIOMotorClient(self._uri, serverSelectionTimeoutMS=self._timeout_ms))
            logger.info(f"Connected to MongoDB database '{self._db_name}'")

    def bind(self, client, db_name: Optional[str] = None):
        """Attach an already constructed (Motor-compatible) client."""
        self._client = client
        self._db = client[db_name or self._db_name]

    async def close(self):
        if self._client is not None:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("Disconnected from MongoDB")

    @property
    def database(self):
        if self._db is None:
            raise StorageUnavailableError("Database connection is not initialized")
        return self._db


mongo_client = MongoDBClient(
    uri=database_config["MONGO_URI"],
    db_name=database_config["DB_NAME"],
    timeout_ms=database_config["SERVER_SELECTION_TIMEOUT_MS"],
)
