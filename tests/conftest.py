import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    # Context manager kör lifespan → nytt StationState för varje test
    with TestClient(app) as c:
        yield c
