import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from fastapi.testclient import TestClient

from inventory_api.core.storage import DocumentStore, get_store
from inventory_api.infra.blobs.local import LocalBlobStore, get_blob_store

os.environ["TESTING"] = "1"


@pytest.fixture
def store(tmp_path):
	s = DocumentStore(tmp_path / "data.json")
	s.ensure()
	return s


@pytest.fixture
def blobs(tmp_path):
	return LocalBlobStore(tmp_path / "uploads")


@pytest.fixture
def client(store, blobs):
	from inventory_api.main import app

	app.dependency_overrides[get_store] = lambda: store
	app.dependency_overrides[get_blob_store] = lambda: blobs
	yield TestClient(app)
	app.dependency_overrides.clear()
