from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from config import Settings, get_settings
from database import DatabaseConnectionError, MongoConnection
from placeholder_data import PLACEHOLDER_DATASET, SeedDataset
from registry import SchemaRegistry

# ---- route modules ----
from routes import seed_routes

logger = logging.getLogger("main")


def create_app(
    settings: Optional[Settings] = None,
    client_factory=AsyncMongoClient,
    dataset: SeedDataset = PLACEHOLDER_DATASET,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ---- startup / shutdown ----
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connection = MongoConnection(settings, client_factory=client_factory)
        registry = SchemaRegistry()
        app.state.connection = connection
        app.state.registry = registry
        app.state.dataset = dataset

        # register schemas once; if mongo is down now, the first /seed call retries
        try:
            db = await connection.connect()
            await registry.register(db)
        except DatabaseConnectionError as e:
            logger.warning("MongoDB not available at startup: %s", e)
        except PyMongoError as e:
            logger.warning("Schema registration failed at startup, retrying on /seed: %s", e)

        yield
        await connection.close()

    app = FastAPI(title="Dashboard Seeder", version="1.0.0", lifespan=lifespan)

    # ---- include routers ----
    app.include_router(seed_routes.router)
    return app


app = create_app()

# ---- dev run ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
