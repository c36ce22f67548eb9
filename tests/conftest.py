"""Shared fixtures: an in-memory Firestore and mocked Auth/FCM clients."""

import copy
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.cloud.firestore import ArrayRemove

from backend.firebase_init import ServiceHandles


class FakeDocumentSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, collection, doc_id):
        self.collection = collection
        self.id = doc_id

    def set(self, data):
        if self.collection.store.fail_writes:
            raise self.collection.store.fail_writes
        self.collection.docs[self.id] = copy.deepcopy(data)

    def apply_update(self, data):
        doc = self.collection.docs.setdefault(self.id, {})
        for field, value in data.items():
            if isinstance(value, ArrayRemove):
                doc[field] = [v for v in doc.get(field, []) if v not in value.values]
            else:
                doc[field] = value


class FakeQuery:
    def __init__(self, collection, field_filter):
        self.collection = collection
        self.field_filter = field_filter

    def stream(self):
        self.collection.store.queries.append(
            (self.field_filter.field_path, self.field_filter.op_string, self.field_filter.value)
        )
        assert self.field_filter.op_string == 'array_contains'
        for snapshot in self.collection.stream():
            values = (snapshot.to_dict() or {}).get(self.field_filter.field_path)
            if isinstance(values, list) and self.field_filter.value in values:
                yield snapshot


class FakeCollection:
    def __init__(self, store, name):
        self.store = store
        self.name = name
        self.docs = {}

    def document(self, doc_id):
        return FakeDocumentReference(self, doc_id)

    def stream(self):
        return [FakeDocumentSnapshot(self.document(doc_id), data) for doc_id, data in self.docs.items()]

    def where(self, filter=None):
        return FakeQuery(self, filter)


class FakeBatch:
    def __init__(self, store):
        self.store = store
        self.updates = []
        self.committed = False

    def update(self, reference, data):
        self.updates.append((reference, data))

    def commit(self):
        if self.store.fail_commit:
            raise self.store.fail_commit
        for reference, data in self.updates:
            reference.apply_update(data)
        self.committed = True


class FakeFirestore:
    def __init__(self):
        self.collections = {}
        self.batches = []
        self.queries = []
        self.fail_writes = None
        self.fail_commit = None

    def collection(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(self, name)
        return self.collections[name]

    def batch(self):
        batch = FakeBatch(self)
        self.batches.append(batch)
        return batch

    def add_user(self, doc_id, data):
        self.collection('users').docs[doc_id] = copy.deepcopy(data)

    def user(self, doc_id):
        return self.collection('users').docs.get(doc_id)

    @property
    def commits(self):
        return [batch for batch in self.batches if batch.committed]


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def mock_auth():
    auth = MagicMock()
    auth.create_user.return_value = SimpleNamespace(uid='uid-123')
    return auth


@pytest.fixture
def mock_messaging():
    return MagicMock()


@pytest.fixture
def services(mock_auth, fake_db, mock_messaging):
    return ServiceHandles(auth=mock_auth, db=fake_db, messaging=mock_messaging)
