import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorGridFSBucket
from pymongo import ASCENDING

logger = logging.getLogger(__name__)

# .env lives next to the app/ package
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
env_path = backend_dir / ".env"

if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()

MONGO_URI = os.getenv("MONGO_URI")
DATABASE_NAME = os.getenv("DATABASE_NAME", "hr_portal")
MONGO_MAX_POOL_SIZE = int(os.getenv("MONGO_MAX_POOL_SIZE", 3))
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))
UPLOADS_BUCKET = "uploads"

client = None
db = None
fs_bucket = None


async def ensure_indexes(database):
    """Create the indexes the services rely on (unique emails, status filters)."""
    await database.users.create_index([("email", ASCENDING)], unique=True)
    await database.users.create_index([("password_reset_token", ASCENDING)])
    await database.employees.create_index([("status", ASCENDING)])
    await database.applicants.create_index([("job_id", ASCENDING)])


async def connect_to_mongo():
    global client, db, fs_bucket

    if not MONGO_URI:
        raise ValueError("MONGO_URI environment variable is not set! Check your .env file.")

    client = AsyncIOMotorClient(
        MONGO_URI,
        maxPoolSize=MONGO_MAX_POOL_SIZE,
        serverSelectionTimeoutMS=MONGO_TIMEOUT_MS,
    )
    db = client[DATABASE_NAME]
    fs_bucket = AsyncIOMotorGridFSBucket(db, bucket_name=UPLOADS_BUCKET)
    await client.admin.command("ping")
    await ensure_indexes(db)

    logger.info("✅ Connected to MongoDB database %r (pool size %d)", DATABASE_NAME, MONGO_MAX_POOL_SIZE)


async def close_mongo_connection():
    if client:
        client.close()
        logger.info("MongoDB connection closed")


def get_fs_bucket():
    return fs_bucket


def get_db():
    return db
