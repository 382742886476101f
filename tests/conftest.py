import os

# must be set before expense_api.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from expense_api.db import Base, engine  # noqa: E402
from expense_api.main import app  # noqa: E402
from expense_api.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_for():
    def _headers(user_id):
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}

    return _headers


@pytest.fixture
def coffee():
    return {
        "title": "Coffee",
        "amount": 4.50,
        "category": "Food & Dining",
        "description": None,
        "date": "2024-01-10",
    }
