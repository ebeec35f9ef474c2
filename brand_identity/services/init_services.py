"""Initialize services"""

import os
import logging
import beanie
from motor.motor_asyncio import AsyncIOMotorClient
from redis import asyncio as aioredis

from .document_store import (
    DocumentStore,
    FileSystemDocumentStore,
    MemoryRecord,
    MongoDocumentStore,
    RedisDocumentStore,
)

logger = logging.getLogger(__name__)

DEFAULT_MEMORY_DIR = os.path.join(os.getcwd(), "memory")
DEFAULT_MONGODB_DATABASE = "brand_identity"


async def init_mongo_store(mongo_uri: str) -> DocumentStore:
    """Connect to MongoDB and register the memory record model"""
    try:
        client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=5000)

        # Test the connection
        await client.admin.command("ping")
        logger.info("Successfully connected to MongoDB")

        database_name = os.getenv("MONGODB_DATABASE", DEFAULT_MONGODB_DATABASE)
        await beanie.init_beanie(
            database=client[database_name],
            document_models=[MemoryRecord],
        )
        logger.info("Beanie initialized successfully")
    except Exception as db_error:
        logger.error("MongoDB connection failed: %s", db_error)
        raise ValueError(f"MongoDB connection failed: {str(db_error)}") from db_error

    return MongoDocumentStore()


async def init_redis_store(redis_url: str) -> DocumentStore:
    """Connect to Redis"""
    try:
        redis_client = aioredis.from_url(redis_url, decode_responses=True)
        await redis_client.ping()
        logger.info("Redis connection successful")
    except Exception as redis_error:
        logger.error("Redis connection failed: %s", redis_error)
        raise ValueError(f"Redis connection failed: {str(redis_error)}") from redis_error

    return RedisDocumentStore(redis_client)


async def init_services() -> DocumentStore:
    """Pick and connect the memory document store from the environment.

    MONGODB_URI selects MongoDB, otherwise REDIS_URL selects Redis, otherwise
    documents are kept as JSON files under MEMORY_DIR.
    """
    try:
        mongo_uri = os.getenv("MONGODB_URI")
        if mongo_uri:
            return await init_mongo_store(mongo_uri)

        redis_url = os.getenv("REDIS_URL")
        if redis_url:
            return await init_redis_store(redis_url)

        memory_dir = os.getenv("MEMORY_DIR", DEFAULT_MEMORY_DIR)
        logger.info("Using filesystem memory store at %s", memory_dir)
        return FileSystemDocumentStore(memory_dir)

    except Exception as e:
        logger.error("Failed to initialize services: %s", e)
        raise
