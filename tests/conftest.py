"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator

# Settings are read at import time, so the environment goes first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from laptopdesk.core.hashing import hash_password
from laptopdesk.database import get_store
from laptopdesk.main import app
from laptopdesk.schemas.base import utc_now
from laptopdesk.schemas.laptop import Laptop
from laptopdesk.schemas.user import User
from laptopdesk.store import RecordStore
from laptopdesk.store.repositories import LaptopRepository, UserRepository

TEST_USERNAME = "admin"
TEST_PASSWORD = "s3cret-pass"


@pytest.fixture
def store(tmp_path) -> RecordStore:
    """Record store over an empty temporary data directory."""
    return RecordStore(tmp_path / "data")


@pytest.fixture
def user(store: RecordStore) -> User:
    """A user that can log in with TEST_USERNAME / TEST_PASSWORD."""
    user = User(
        id="U1",
        username=TEST_USERNAME,
        name="Shop Owner",
        password_hash=hash_password(TEST_PASSWORD),
        created_at=utc_now(),
    )
    UserRepository(store).save([user])
    return user


@pytest.fixture
def make_laptop(store: RecordStore) -> Callable[..., Laptop]:
    """Factory appending a laptop to the store."""

    def _make(laptop_id: str = "L1", quantity: int = 1, status: str = "available") -> Laptop:
        laptop = Laptop(
            id=laptop_id,
            corporate_brand="Dell",
            product_brand="Latitude 5490",
            performance_tier="i5",
            generation="8th",
            sku=f"SKU-{laptop_id}",
            purchase_price=3200,
            condition_notes="Light scratches on lid",
            quantity=quantity,
            status=status,
            purchase_date="2023-12-15",
            created_at=utc_now(),
        )
        repo = LaptopRepository(store)
        laptops = repo.get_all()
        laptops.append(laptop)
        repo.save(laptops)
        return laptop

    return _make


@pytest.fixture
def client(store: RecordStore) -> Generator[TestClient, None, None]:
    """Test client wired to the temporary store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client: TestClient, user: User) -> TestClient:
    """Test client holding a valid session cookie."""
    response = client.post(
        "/auth/login",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def sale_payload() -> dict:
    return {
        "laptopId": "L1",
        "clientId": "C1",
        "salePrice": 5000,
        "paymentStatus": "paid",
        "paymentMethod": "cash",
        "saleDate": "2024-01-01",
    }
