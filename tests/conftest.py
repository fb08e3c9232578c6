"""
Shared pytest fixtures.

Endpoint tests run against the FastAPI app through httpx's ASGITransport.
The lifespan is not started, so no real MongoDB is needed: get_database is
overridden with an in-memory mongomock-motor database seeded with the
sample departments.
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

# Settings are read at import time, so the environment must be set first
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB_NAME"] = "employee_list_test"
os.environ["TOKEN_SECRET"] = "test-secret-not-real"
os.environ["BCRYPT_ROUNDS"] = "4"  # Keep hashing fast
os.environ["LOG_LEVEL"] = "WARNING"

from app.config import get_settings  # noqa: E402
from app.database import get_database, insert_sample_data  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def settings():
    return get_settings()


@pytest_asyncio.fixture
async def mongo_db():
    client = AsyncMongoMockClient()
    db = client["employee_list_test"]
    await insert_sample_data(db)
    return db


@pytest_asyncio.fixture
async def test_client(mongo_db):
    """HTTPX AsyncClient talking to the app with the mock database injected"""
    async def override_get_database():
        return mongo_db

    app.dependency_overrides[get_database] = override_get_database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def employee_payload():
    return {
        "employeeName": "Alice Tan",
        "age": 30,
        "salary": 5200,
        "joinDate": "2023-01-15",
        "department": "IT",
        "employmentStatus": "full-time",
    }


@pytest_asyncio.fixture
async def seeded_employees(mongo_db):
    employees = [
        {"employeeName": "Alice Tan", "age": 30, "salary": 5200.0, "joinDate": "2023-01-15",
         "department": "IT", "employmentStatus": "full-time"},
        {"employeeName": "Bob Lim", "age": 41, "salary": 6100.0, "joinDate": "2022-06-01",
         "department": "Sales", "employmentStatus": "part-time"},
        {"employeeName": "Malice Ong", "age": 27, "salary": 3900.0, "joinDate": "2023-01-15",
         "department": "Marketing", "employmentStatus": "contract"},
        {"employeeName": "Charlie Goh", "age": 35, "salary": 4800.0, "joinDate": "2021-11-20",
         "department": "IT", "employmentStatus": "full-time"},
    ]
    await mongo_db["employeeList"].insert_many(employees)
    return employees
