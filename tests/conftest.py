import os

# Test không cần eventlet
os.environ.setdefault("SOCKETIO_ASYNC_MODE", "threading")

import pytest

from app import create_app, socketio


class FakeCollection:
    """Collection trong bộ nhớ, chỉ đủ find_one / update_one cho test."""

    def __init__(self):
        self.docs = []

    def _khop(self, doc, filter):
        return all(doc.get(k) == v for k, v in filter.items())

    def find_one(self, filter):
        for doc in self.docs:
            if self._khop(doc, filter):
                return dict(doc)
        return None

    def update_one(self, filter, update, upsert=False):
        for doc in self.docs:
            if self._khop(doc, filter):
                doc.update(update.get("$set", {}))
                return
        if upsert:
            doc = dict(filter)
            doc.update(update.get("$set", {}))
            self.docs.append(doc)


class FakeDb:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def __getattr__(self, name):
        if name.startswith("_") or name == "collections":
            raise AttributeError(name)
        return self[name]


BANG_MAU = (
    "Đầu\tĐuôi\n"
    "0\t1,2\n"
    "1\t\n"
    "2\t3,3,9\n"
)

# Bảng đủ 10 đầu, 27 giải
BANG_DAY_DU = (
    "Đầu\tĐuôi\n"
    "0\t0,5,8\n"
    "1\t1,3,6,9\n"
    "2\t\n"
    "3\t2,3,7\n"
    "4\t0,1\n"
    "5\t5,6,8,9\n"
    "6\t1\n"
    "7\t\n"
    "8\t0,3,5,6,8\n"
    "9\t1,3,6,9,9\n"
)


@pytest.fixture
def bang_mau():
    return BANG_MAU


@pytest.fixture
def bang_day_du():
    return BANG_DAY_DU


@pytest.fixture
def fake_db():
    return FakeDb()


@pytest.fixture
def app(fake_db):
    app = create_app({"TESTING": True})
    app.db = fake_db
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = socketio.test_client(app)
    yield client
    client.disconnect()
