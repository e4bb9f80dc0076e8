from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from sensor_gateway.config import Config
from sensor_gateway.main import create_app
from sensor_gateway.services import READ_LIMIT


WRITE_TOKEN = "write-token-123"
DELETE_TOKEN = "delete-token-456"


class InMemoryMeasureStore:
    """
    Stand-in for MeasureStore that keeps documents in a list.

    Mirrors the real store's query: date >= cutoff, no _id, capped at READ_LIMIT.
    """

    def __init__(self):
        self.documents = []
        self.calls = []
        self.fail_with = None
        self.acknowledge = True

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def save(self, measure_value):
        self._record("save")
        if self.acknowledge:
            self.documents.append({
                "_id": len(self.documents) + 1,
                "value": measure_value,
                "date": datetime.now(timezone.utc),
            })
        return self.acknowledge

    def read(self, cutoff):
        self._record("read")
        matches = [
            {k: v for k, v in doc.items() if k != "_id"}
            for doc in self.documents
            if doc["date"] >= cutoff
        ]
        return matches[:READ_LIMIT]

    def delete_all(self):
        self._record("delete_all")
        if self.acknowledge:
            self.documents.clear()
        return self.acknowledge

    def ping(self):
        return self.fail_with is None

    def close(self):
        pass


@pytest.fixture
def config() -> Config:
    return Config(
        mongo_uri="mongodb://localhost:27017",
        database="sensors",
        collection="measures",
        token_write=WRITE_TOKEN,
        token_delete=DELETE_TOKEN,
    )


@pytest.fixture
def store() -> InMemoryMeasureStore:
    return InMemoryMeasureStore()


@pytest.fixture
def client(config, store):
    with TestClient(create_app(config, store)) as test_client:
        yield test_client


@pytest.fixture
def write_headers() -> dict:
    return {"Authorization": f"Bearer {WRITE_TOKEN}"}


@pytest.fixture
def delete_headers() -> dict:
    return {"Authorization": f"Bearer {DELETE_TOKEN}"}
