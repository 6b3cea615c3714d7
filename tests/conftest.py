"""Pytest configuration and fixtures."""

import os
import sys
from types import SimpleNamespace

import pytest

# Add root to path for main.py
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Set emulator environment variables before any Firebase imports
os.environ["GCLOUD_PROJECT"] = "test-project"
os.environ["ENV"] = "development"
os.environ["FUNCTIONS_EMULATOR"] = "true"
os.environ["FIRESTORE_EMULATOR_HOST"] = "localhost:8080"
os.environ["FIREBASE_AUTH_EMULATOR_HOST"] = "localhost:9099"
os.environ["FIREBASE_STORAGE_EMULATOR_HOST"] = "localhost:9199"

# Import main to ensure the Firebase app is initialized and every function imports
import main  # noqa: E402,F401

from storefront.apis.Db import Db  # noqa: E402
from storefront.services.asset_uploader import AssetUploader  # noqa: E402
from storefront.services.catalog_service import CatalogStore  # noqa: E402
from storefront.services.identity_resolver import IdentityResolver  # noqa: E402
from tests.util.fake_firestore import FakeAuth, FakeBucket, FakeCollection  # noqa: E402
from tests.util.firebase_emulator import firebase_emulator  # noqa: E402,F401
from tests.util.product_flow_setup import product_flow_setup  # noqa: E402,F401


@pytest.fixture
def products_collection():
    return FakeCollection("products")


@pytest.fixture
def users_collection():
    return FakeCollection("users")


@pytest.fixture
def bucket():
    return FakeBucket()


@pytest.fixture
def fake_auth():
    return FakeAuth()


@pytest.fixture
def uploader(bucket):
    return AssetUploader(bucket=bucket)


@pytest.fixture
def catalog(products_collection, uploader):
    return CatalogStore(collection_ref=products_collection, uploader=uploader)


@pytest.fixture
def resolver(fake_auth, users_collection):
    return IdentityResolver(auth=fake_auth, role_records=users_collection)


@pytest.fixture
def fake_db(monkeypatch, products_collection, users_collection, bucket):
    """Route the Db singleton and default bucket to the in-memory fakes."""
    db = SimpleNamespace(
        collections={"products": products_collection, "users": users_collection},
        timestamp_now=Db.timestamp_now,
    )
    monkeypatch.setattr(Db, "get_instance", lambda: db)
    monkeypatch.setattr(Db, "bucket", lambda name=None: bucket)
    return db
