# todo_service/db/store.py
"""
MongoDB-backed Todo store.

One TodoStore is created per process at startup and handed to every request
through a FastAPI dependency. It owns the Motor client; Beanie is initialised
against it on connect.
"""
from typing import List, Optional

from beanie import PydanticObjectId, init_beanie
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from todo_service.core.exceptions import StoreError
from todo_service.core.logging import log
from todo_service.models.todo import Todo, TodoOut

# Negates `completed` server-side; a missing field counts as false
_TOGGLE_PIPELINE = [{"$set": {"completed": {"$not": ["$completed"]}}}]


class TodoStore:
    def __init__(self, mongo_url: str, db_name: str, timeout_ms: int = 5000):
        self.mongo_url = mongo_url
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._connected = False
        self._connection_error: Optional[str] = None

    @classmethod
    def from_settings(cls, settings) -> "TodoStore":
        return cls(settings.MONGO_URL, settings.DB_NAME, settings.MONGO_TIMEOUT_MS)

    async def connect(self) -> None:
        """
        Connect to MongoDB and initialise Beanie.

        A failure is logged and remembered rather than raised, so the service
        keeps listening; every later operation reports it as a StoreError.
        """
        try:
            self._client = AsyncIOMotorClient(self.mongo_url, serverSelectionTimeoutMS=self.timeout_ms)
            # Fails fast if MongoDB is not running
            await self._client.admin.command("ping")
            await init_beanie(database=self._client[self.db_name], document_models=[Todo])
        except Exception as e:
            # Bad URIs raise ValueError or ConfigurationError before any network call
            self._connection_error = str(e)
            self._connected = False
            log("DB", f"❌ MongoDB connection error: {e}")
            return

        self._connected = True
        self._connection_error = None
        log("DB", f"✅ MongoDB connected ({self.db_name})")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            log("DB", "Disconnected from MongoDB")
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def connection_error(self) -> Optional[str]:
        return self._connection_error

    def _ensure_connected(self, operation: str) -> None:
        if not self._connected:
            raise StoreError(self._connection_error or "Database not connected", operation)

    async def list_todos(self) -> List[TodoOut]:
        self._ensure_connected("list")
        try:
            todos = await Todo.find_all().to_list()
        except PyMongoError as e:
            raise StoreError(str(e), "list") from e
        return [TodoOut.from_document(todo) for todo in todos]

    async def create_todo(self, text: str) -> TodoOut:
        self._ensure_connected("create")
        todo = Todo(text=text)
        try:
            await todo.insert()
        except PyMongoError as e:
            raise StoreError(str(e), "create") from e
        return TodoOut.from_document(todo)

    async def toggle_todo(self, todo_id: str) -> Optional[TodoOut]:
        """
        Flip ``completed`` in a single atomic update.

        Returns None when no Todo has this id, including ids that are not
        valid ObjectIds.
        """
        self._ensure_connected("toggle")
        if not ObjectId.is_valid(todo_id):
            return None

        collection = Todo.get_motor_collection()
        try:
            raw = await collection.find_one_and_update(
                {"_id": ObjectId(todo_id)},
                _TOGGLE_PIPELINE,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(str(e), "toggle") from e

        if raw is None:
            return None
        return TodoOut(id=str(raw["_id"]), text=raw["text"], completed=raw["completed"])

    async def delete_todo(self, todo_id: str) -> None:
        """Remove the Todo if it exists; absent or malformed ids are a no-op."""
        self._ensure_connected("delete")
        if not ObjectId.is_valid(todo_id):
            return

        try:
            await Todo.find_one({"_id": PydanticObjectId(todo_id)}).delete()
        except PyMongoError as e:
            raise StoreError(str(e), "delete") from e
