import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Tuple, Type

from fastapi import Request
from pymongo import ASCENDING

from models import Customer, Invoice, Record, Revenue, User

logger = logging.getLogger("database")


@dataclass(frozen=True)
class RecordSchema:
    entity: str
    collection: str
    model: Type[Record]
    unique: Tuple[str, ...] = ()


# storage names follow the pluralized model names
SCHEMAS: Dict[str, RecordSchema] = {
    "User": RecordSchema("User", "users", User, unique=("email",)),
    "Invoice": RecordSchema("Invoice", "invoices", Invoice),
    "Customer": RecordSchema("Customer", "customers", Customer),
    "Revenue": RecordSchema("Revenue", "revenues", Revenue, unique=("month",)),
}


class SchemaRegistry:
    """Holds the record schemas and creates their unique indexes exactly once."""

    def __init__(self, schemas: Dict[str, RecordSchema] = SCHEMAS):
        self.schemas = dict(schemas)
        self._registered = False
        self._lock = asyncio.Lock()

    @property
    def registered(self) -> bool:
        return self._registered

    def schema(self, entity: str) -> RecordSchema:
        return self.schemas[entity]

    def collection(self, db, entity: str):
        return db[self.schemas[entity].collection]

    async def register(self, db) -> None:
        if self._registered:
            return
        async with self._lock:
            if self._registered:
                return
            for schema in self.schemas.values():
                for field in schema.unique:
                    await db[schema.collection].create_index([(field, ASCENDING)], unique=True)
                    logger.info("Unique index ensured on %s.%s", schema.collection, field)
            self._registered = True


# ---- fastapi dependencies ----
def get_registry(request: Request) -> SchemaRegistry:
    return request.app.state.registry
