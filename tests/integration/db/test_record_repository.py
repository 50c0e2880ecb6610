"""Integration tests for the SQLAlchemy stores."""

import pytest

from lowcode.modules.data.repos import RecordRepository
from lowcode.modules.models.repos import ModelDefinitionRepository
from lowcode.modules.versions.repos import ModelVersionRepository
from tests.factories import make_field, make_model


pytestmark = pytest.mark.integration


class TestRecordRepository:
    """Tests for RecordRepository."""

    async def test_create_ignores_payload_id(self, db):
        repo = RecordRepository(db)

        record = await repo.create("Product", {"id": "mine", "name": "Widget"})

        assert record["id"] != "mine"
        assert await repo.get_by_id("Product", record["id"]) == record

    async def test_records_are_scoped_by_model(self, db):
        repo = RecordRepository(db)
        record = await repo.create("Product", {"name": "Widget"})

        assert await repo.get_by_id("Order", record["id"]) is None
        assert await repo.list("Order") == []

    async def test_list_in_creation_order(self, db):
        repo = RecordRepository(db)
        first = await repo.create("Product", {"name": "A"})
        second = await repo.create("Product", {"name": "B"})

        assert [r["id"] for r in await repo.list("Product")] == [first["id"], second["id"]]

    async def test_update_merges(self, db):
        repo = RecordRepository(db)
        record = await repo.create("Product", {"name": "Widget", "price": 1})

        updated = await repo.update("Product", record["id"], {"price": 2, "id": "other"})

        assert updated == {"id": record["id"], "name": "Widget", "price": 2}
        assert await repo.get_by_id("Product", record["id"]) == updated

    async def test_update_missing(self, db):
        assert await RecordRepository(db).update("Product", "nope", {"price": 2}) is None

    async def test_delete(self, db):
        repo = RecordRepository(db)
        record = await repo.create("Product", {"name": "Widget"})

        assert await repo.delete("Product", record["id"]) is True
        assert await repo.delete("Product", record["id"]) is False
        assert await repo.get_by_id("Product", record["id"]) is None


class TestModelDefinitionRepository:
    """Tests for ModelDefinitionRepository."""

    async def test_save_and_get(self, db):
        repo = ModelDefinitionRepository(db)
        model = make_model(name="Product", fields=[make_field("name", required=True)], owner_field="ownerId")

        saved = await repo.save(model)
        loaded = await repo.get("Product")

        assert loaded == saved
        assert loaded.owner_field == "ownerId"
        assert loaded.fields[0].is_required

    async def test_save_replaces_by_name(self, db):
        repo = ModelDefinitionRepository(db)
        await repo.save(make_model(name="Product"))

        await repo.save(make_model(name="Product", fields=[make_field("title")]))

        models = await repo.list()
        assert len(models) == 1
        assert models[0].fields[0].name == "title"

    async def test_list_ordered_by_name(self, db):
        repo = ModelDefinitionRepository(db)
        for name in ("Order", "Customer", "Product"):
            await repo.save(make_model(name=name))

        assert [m.name for m in await repo.list()] == ["Customer", "Order", "Product"]

    async def test_delete(self, db):
        repo = ModelDefinitionRepository(db)
        await repo.save(make_model(name="Product"))

        assert await repo.delete("Product") is True
        assert await repo.get("Product") is None
        assert await repo.delete("Product") is False


class TestModelVersionRepository:
    """Tests for ModelVersionRepository."""

    async def test_versions_increment_per_model(self, db):
        repo = ModelVersionRepository(db)

        first = await repo.add("Product", {"name": "Product"}, "Created model Product", "a1")
        second = await repo.add("Product", {"name": "Product"}, "Updated model Product", "a1")
        other = await repo.add("Order", {"name": "Order"}, "Created model Order", "a1")

        assert (first.version, second.version, other.version) == (1, 2, 1)
        assert await repo.latest_version("Product") == 2
        assert await repo.latest_version("Ghost") == 0
