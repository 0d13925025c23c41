# seeders.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from auth import hash_password_async
from placeholder_data import SeedDataset
from registry import RecordSchema, SchemaRegistry

logger = logging.getLogger("seed")


@dataclass(frozen=True)
class SeedResult:
    entity: str
    inserted: int


class SeedBatchError(Exception):
    """
    Raised once every insert of a batch has settled and at least one of them failed.
    Records that were committed before (or alongside) the failure stay in the database.
    """

    def __init__(self, entity: str, inserted: int, failures: List[Tuple[int, BaseException]]):
        self.entity = entity
        self.inserted = inserted
        self.failures = failures
        first_index, first_error = failures[0]
        super().__init__(
            f"{entity}: {len(failures)} record(s) failed, {inserted} inserted "
            f"(first failure at #{first_index}: {first_error!r})"
        )


class Seeder:
    """Validates each source row into its schema's model and inserts all of them concurrently."""

    def __init__(self, schema: RecordSchema, records: Sequence[Mapping[str, Any]]):
        self.schema = schema
        self.records = list(records)

    @property
    def entity(self) -> str:
        return self.schema.entity

    async def build(self, source: Mapping[str, Any]) -> dict:
        return self.schema.model.model_validate(dict(source)).to_document()

    async def _persist(self, collection, source: Mapping[str, Any]) -> None:
        document = await self.build(source)
        await collection.insert_one(document)

    async def run(self, db) -> SeedResult:
        collection = db[self.schema.collection]
        outcomes = await asyncio.gather(
            *(self._persist(collection, source) for source in self.records),
            return_exceptions=True,
        )
        failures = [(i, o) for i, o in enumerate(outcomes) if isinstance(o, BaseException)]
        inserted = len(outcomes) - len(failures)
        if failures:
            raise SeedBatchError(self.entity, inserted, failures)
        logger.info("Seeded %d %s record(s) into %s", inserted, self.entity, self.schema.collection)
        return SeedResult(self.entity, inserted)


class UserSeeder(Seeder):
    async def build(self, source: Mapping[str, Any]) -> dict:
        row = dict(source)
        if "password" in row:
            row["password"] = await hash_password_async(row["password"])
        return await super().build(row)


class CustomerSeeder(Seeder):
    """Remembers which _id each source customer id was inserted under."""

    def __init__(self, schema: RecordSchema, records: Sequence[Mapping[str, Any]], id_map: Dict[str, Any]):
        super().__init__(schema, records)
        self.id_map = id_map

    async def _persist(self, collection, source: Mapping[str, Any]) -> None:
        document = await self.build(source)
        result = await collection.insert_one(document)
        if source.get("id") is not None:
            self.id_map[str(source["id"])] = result.inserted_id


class InvoiceSeeder(Seeder):
    def __init__(self, schema: RecordSchema, records: Sequence[Mapping[str, Any]], id_map: Dict[str, Any]):
        super().__init__(schema, records)
        self.id_map = id_map

    async def build(self, source: Mapping[str, Any]) -> dict:
        row = dict(source)
        ref = row.get("customer_id")
        if ref is not None and str(ref) in self.id_map:
            row["customer_id"] = self.id_map[str(ref)]
        return await super().build(row)


def build_seeders(registry: SchemaRegistry, dataset: SeedDataset) -> List[Seeder]:
    """Seeders in the order they must run: users, customers, invoices, revenue."""
    customer_ids: Dict[str, Any] = {}
    return [
        UserSeeder(registry.schema("User"), dataset.users),
        CustomerSeeder(registry.schema("Customer"), dataset.customers, customer_ids),
        InvoiceSeeder(registry.schema("Invoice"), dataset.invoices, customer_ids),
        Seeder(registry.schema("Revenue"), dataset.revenue),
    ]


async def run_seeders(db, seeders: Iterable[Seeder]) -> List[SeedResult]:
    results = []
    for seeder in seeders:
        results.append(await seeder.run(db))
    return results
