"""Mock MongoDB client for testing."""

from typing import Any
from unittest.mock import MagicMock


def _matches(document: dict[str, Any], filter_: dict[str, Any]) -> bool:
    for key, condition in filter_.items():
        value = document.get(key)
        if isinstance(condition, dict) and "$in" in condition:
            if value not in condition["$in"]:
                return False
        elif value != condition:
            return False
    return True


class MockMongoCollection:
    """Mock MongoDB collection keeping documents in insertion order."""

    def __init__(self) -> None:
        self._documents: list[dict[str, Any]] = []

    async def insert_one(self, document: dict[str, Any]) -> MagicMock:
        stored = {"_id": f"oid-{len(self._documents):06d}", **document}
        self._documents.append(stored)
        result = MagicMock()
        result.inserted_id = stored["_id"]
        return result

    async def replace_one(
        self,
        filter_: dict[str, Any],
        replacement: dict[str, Any],
        upsert: bool = False,
    ) -> MagicMock:
        result = MagicMock()
        result.modified_count = 0
        for index, document in enumerate(self._documents):
            if _matches(document, filter_):
                self._documents[index] = {"_id": document["_id"], **replacement}
                result.modified_count = 1
                return result
        if upsert:
            await self.insert_one(replacement)
        return result

    async def update_one(
        self,
        filter_: dict[str, Any],
        update: dict[str, Any],
    ) -> MagicMock:
        result = MagicMock()
        result.modified_count = 0
        for document in self._documents:
            if _matches(document, filter_):
                document.update(update.get("$set", {}))
                result.modified_count = 1
                break
        return result

    async def find_one(self, filter_: dict[str, Any]) -> dict[str, Any] | None:
        for document in self._documents:
            if _matches(document, filter_):
                return dict(document)
        return None

    def find(self, filter_: dict[str, Any] | None = None) -> "MockCursor":
        docs = [dict(d) for d in self._documents if _matches(d, filter_ or {})]
        return MockCursor(docs)

    async def create_index(self, *args: Any, **kwargs: Any) -> str:
        return "index"


class MockCursor:
    """Mock MongoDB cursor supporting sort and limit."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    def sort(
        self,
        key: str | list[tuple[str, int]],
        direction: int = 1,
    ) -> "MockCursor":
        keys = [(key, direction)] if isinstance(key, str) else key
        # Stable sorts applied from the last key to the first
        for name, order in reversed(keys):
            self._documents.sort(key=lambda d, name=name: d[name], reverse=order < 0)
        return self

    def limit(self, n: int) -> "MockCursor":
        if n:
            self._documents = self._documents[:n]
        return self

    def __aiter__(self) -> "MockCursor":
        self._index = 0
        return self

    async def __anext__(self) -> dict[str, Any]:
        if self._index >= len(self._documents):
            raise StopAsyncIteration
        doc = self._documents[self._index]
        self._index += 1
        return doc


class MockMongoClient:
    """Mock of captain_claw's MongoClient wrapper."""

    def __init__(self) -> None:
        self._collections: dict[str, MockMongoCollection] = {}

    def __getitem__(self, name: str) -> MockMongoCollection:
        if name not in self._collections:
            self._collections[name] = MockMongoCollection()
        return self._collections[name]

    @property
    def projects(self) -> MockMongoCollection:
        return self["projects"]

    @property
    def conversations(self) -> MockMongoCollection:
        return self["conversations"]

    @property
    def messages(self) -> MockMongoCollection:
        return self["messages"]

    @property
    def files(self) -> MockMongoCollection:
        return self["files"]

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def create_indexes(self) -> None:
        pass
