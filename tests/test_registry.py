import asyncio

from registry import SCHEMAS, SchemaRegistry


def _unique_fields(collection):
    fields = set()
    for info in collection.index_information().values():
        if info.get("unique"):
            fields.update(key for key, _ in info["key"])
    return fields


def test_schemas_cover_four_collections() -> None:
    assert {s.collection for s in SCHEMAS.values()} == {"users", "invoices", "customers", "revenues"}


def test_register_creates_unique_indexes(async_db, db) -> None:
    registry = SchemaRegistry()
    asyncio.run(registry.register(async_db))
    assert registry.registered
    assert _unique_fields(db.users) == {"email"}
    assert _unique_fields(db.revenues) == {"month"}
    assert _unique_fields(db.customers) == set()


def test_register_runs_once(async_db) -> None:
    calls = []

    class CountingDatabase:
        def __getitem__(self, name):
            collection = async_db[name]

            class _Counting:
                async def create_index(self, keys, **kwargs):
                    calls.append(name)
                    return await collection.create_index(keys, **kwargs)

            return _Counting()

    registry = SchemaRegistry()
    fake = CountingDatabase()

    async def _run():
        await registry.register(fake)
        await registry.register(fake)

    asyncio.run(_run())
    assert sorted(calls) == ["revenues", "users"]


def test_collection_lookup(async_db) -> None:
    registry = SchemaRegistry()
    assert registry.collection(async_db, "Revenue") is not None
    assert registry.schema("User").unique == ("email",)
