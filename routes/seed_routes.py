# routes/seed_routes.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from database import DatabaseConnectionError, MongoConnection, get_connection
from registry import SchemaRegistry, get_registry
from seeders import SeedBatchError, build_seeders, run_seeders

logger = logging.getLogger("seed")

router = APIRouter()


@router.get("/seed")
async def seed_database(
    request: Request,
    connection: MongoConnection = Depends(get_connection),
    registry: SchemaRegistry = Depends(get_registry),
):
    try:
        db = await connection.connect()
    except DatabaseConnectionError as e:
        logger.error("Seeding skipped, no database connection: %s", e)
        return JSONResponse({"error": "Database unavailable"}, status_code=503)

    try:
        await registry.register(db)
        results = await run_seeders(db, build_seeders(registry, request.app.state.dataset))
    except SeedBatchError as e:
        logger.error("Error seeding database: %s", e)
        for index, error in e.failures:
            logger.debug("%s #%d failed: %r", e.entity, index, error)
        return JSONResponse({"error": "Failed to seed database"}, status_code=500)
    except Exception:
        logger.exception("Error seeding database")
        return JSONResponse({"error": "Failed to seed database"}, status_code=500)

    logger.info("Database seeded: %s", ", ".join(f"{r.entity}={r.inserted}" for r in results))
    return {"message": "Database seeded successfully"}


@router.get("/health")
async def health(connection: MongoConnection = Depends(get_connection)):
    return {"ok": True, "database": connection.connected}
