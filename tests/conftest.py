import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import TransactionStore, get_store


@pytest.fixture
def store() -> TransactionStore:
    return TransactionStore()


@pytest.fixture
def client(store: TransactionStore):
    app.dependency_overrides[get_store] = lambda: store
    # Sin "with": no se ejecuta el lifespan, así que no se cargan los datos de prueba globales
    yield TestClient(app)
    app.dependency_overrides.clear()
