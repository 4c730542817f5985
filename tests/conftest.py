import json

import pytest
from fastapi.testclient import TestClient

from marketing_api.config import AppConfig
from marketing_api.data_store import DataStore, get_store
from marketing_api.main import app
from sample_documents import CAMPAIGNS_DOC, ENCRYPTED_USERS_DOC, USERS_DOC


@pytest.fixture
def config(tmp_path):
    campaigns = tmp_path / "marketing-data.json"
    users = tmp_path / "users.json"
    encrypted = tmp_path / "encrypted-users.json"
    campaigns.write_text(json.dumps(CAMPAIGNS_DOC))
    users.write_text(json.dumps(USERS_DOC))
    encrypted.write_text(json.dumps(ENCRYPTED_USERS_DOC))
    return AppConfig(campaigns_path=campaigns, users_path=users, encrypted_users_path=encrypted)


@pytest.fixture
def store(config):
    return DataStore(config)


@pytest.fixture
def client(store):
    app.dependency_overrides.clear()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
