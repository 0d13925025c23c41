"""Seed the dashboard database from the command line.

Runs the same workflow as GET /seed against MONGODB_URI.
Not idempotent: a second run collides on users.email and revenues.month.

Usage: python seed.py
"""

import asyncio
import logging
import sys

from pymongo import AsyncMongoClient

from config import get_settings
from database import DatabaseConnectionError, MongoConnection
from placeholder_data import PLACEHOLDER_DATASET
from registry import SchemaRegistry
from seeders import SeedBatchError, build_seeders, run_seeders

logger = logging.getLogger("seed")


async def seed(settings=None, client_factory=AsyncMongoClient, dataset=PLACEHOLDER_DATASET) -> int:
    settings = settings or get_settings()
    connection = MongoConnection(settings, client_factory=client_factory)
    registry = SchemaRegistry()

    try:
        db = await connection.connect()
        await registry.register(db)
        results = await run_seeders(db, build_seeders(registry, dataset))
    except DatabaseConnectionError as e:
        logger.error("Cannot connect to MongoDB: %s", e)
        return 1
    except SeedBatchError as e:
        logger.error("Seeding failed: %s", e)
        return 1
    except Exception:
        logger.exception("Seeding failed")
        return 1
    finally:
        await connection.close()

    for r in results:
        logger.info("%-8s %d", r.entity, r.inserted)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=get_settings().log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(asyncio.run(seed()))
