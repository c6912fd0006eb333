from __future__ import annotations

import sys
from pathlib import Path

import pytest
from bson import ObjectId
from pymongo.errors import BulkWriteError, ServerSelectionTimeoutError

# Importable without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


class InsertManyResult:
    def __init__(self, inserted_ids):
        self.inserted_ids = inserted_ids


class FakeCollection:
    """Just enough of pymongo's Collection for the scripts under test."""

    def __init__(self, name: str):
        self.name = name
        self.docs: list[dict] = []
        self.unique: set[str] = set()
        self.indexes: list[tuple[str, bool]] = []
        self.aggregate_rows: list[dict] = []
        self.aggregate_error: Exception | None = None
        self.pipelines: list[list] = []

    def create_index(self, key, unique=False):
        self.indexes.append((key, unique))
        if unique:
            self.unique.add(key)
        return f"{key}_1"

    def insert_many(self, docs, ordered=True):
        ids = []
        for i, d in enumerate(docs):
            for key in self.unique:
                if any(x.get(key) == d.get(key) for x in self.docs):
                    raise BulkWriteError({
                        "writeErrors": [{
                            "index": i,
                            "code": 11000,
                            "errmsg": f"E11000 duplicate key error collection: {self.name} dup key: {{ {key}: \"{d.get(key)}\" }}",
                        }],
                        "nInserted": i,
                    })
            d.setdefault("_id", ObjectId())
            self.docs.append(d)
            ids.append(d["_id"])
        return InsertManyResult(ids)

    def find(self, filter_=None, projection=None):
        projection = projection or {}
        keep = [k for k, v in projection.items() if v and k != "_id"]
        out = []
        for d in self.docs:
            row = {k: d[k] for k in keep if k in d} if keep else dict(d)
            if projection.get("_id", 1) == 0:
                row.pop("_id", None)
            elif keep and "_id" in d:
                row["_id"] = d["_id"]
            out.append(row)
        return iter(out)

    def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        if self.aggregate_error is not None:
            raise self.aggregate_error
        return iter(list(self.aggregate_rows))


class FakeDatabase:
    def __init__(self, name: str):
        self.name = name
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeAdmin:
    def __init__(self, client):
        self.client = client

    def command(self, name):
        self.client.commands.append(name)
        if self.client.ping_error is not None:
            raise self.client.ping_error
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, server):
        self.server = server
        self.commands: list[str] = []
        self.ping_error = server.ping_error
        self.closed = False
        self.admin = FakeAdmin(self)

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.server.database(name)

    def close(self):
        self.closed = True


class FakeServer:
    """Stands in for a running mongod: databases outlive individual clients."""

    def __init__(self):
        self.databases: dict[str, FakeDatabase] = {}
        self.clients: list[FakeClient] = []
        self.client_kwargs: list[dict] = []
        self.ping_error: Exception | None = None
        self.connect_error: Exception | None = None

    def database(self, name: str) -> FakeDatabase:
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def connect(self, uri=None, **kwargs):
        self.client_kwargs.append({"uri": uri, **kwargs})
        if self.connect_error is not None:
            raise self.connect_error
        c = FakeClient(self)
        self.clients.append(c)
        return c

    def go_down(self):
        self.ping_error = ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    from college_enrollments import db

    srv = FakeServer()
    monkeypatch.setattr(db, "MongoClient", srv.connect)
    monkeypatch.setattr(db, "DB_NAME", "college_test")
    return srv


@pytest.fixture
def college(server) -> FakeDatabase:
    return server.database("college_test")
