# app/database.py
import logging
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from app.config import Settings

logger = logging.getLogger(__name__)

EMPLOYEE_COLLECTION = "employeeList"
DEPARTMENT_COLLECTION = "department"
USER_COLLECTION = "users"

SAMPLE_DEPARTMENTS = ["Sales", "Marketing", "IT", "Finance", "Human Resources"]

def connect_to_mongo(settings: Settings) -> AsyncIOMotorClient:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return client

def close_mongo_connection(client: AsyncIOMotorClient):
    if client:
        client.close()
        logger.info("Closed MongoDB connection")

async def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db

async def init_db(db: AsyncIOMotorDatabase):
    try:
        # Create collections
        collections = await db.list_collection_names()
        for name in (EMPLOYEE_COLLECTION, DEPARTMENT_COLLECTION, USER_COLLECTION):
            if name not in collections:
                await db.create_collection(name)

        # Employee indexes
        await db[EMPLOYEE_COLLECTION].create_index([("employmentStatus", ASCENDING)])

        # Lookup indexes
        await db[DEPARTMENT_COLLECTION].create_index([("departmentName", ASCENDING)])
        await db[USER_COLLECTION].create_index([("email", ASCENDING)])

        logger.info("Database initialized successfully")
        return True
    except Exception:
        logger.exception("Database initialization failed")
        return False

async def insert_sample_data(db: AsyncIOMotorDatabase):
    try:
        # Check if data already exists
        if await db[DEPARTMENT_COLLECTION].count_documents({}) > 0:
            logger.info("Sample departments already exist. Skipping insertion.")
            return True

        departments = [{"departmentName": name} for name in SAMPLE_DEPARTMENTS]
        await db[DEPARTMENT_COLLECTION].insert_many(departments)

        logger.info("Inserted %d sample departments", len(departments))
        return True
    except Exception:
        logger.exception("Failed to insert sample data")
        return False
