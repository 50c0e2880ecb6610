"""Unit tests for model version recording and lookup."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from lowcode.core.auth.schemas import Principal
from lowcode.core.errors import NotFoundError
from lowcode.core.events import ChangeAction, ChangeEvent, EntityType
from lowcode.core.permissions.roles import Role
from lowcode.modules.versions.services import ModelVersionRecorder, ModelVersionService


pytestmark = pytest.mark.unit

ADMIN = Principal(id="a1", role=Role.ADMIN)


def _event(action: ChangeAction, entity_type: EntityType = EntityType.MODEL_DEFINITION) -> ChangeEvent:
    definition = {"name": "Product", "fields": []}
    return ChangeEvent(
        action=action,
        entity_type=entity_type,
        entity_id="Product",
        entity_name="Product",
        before=None if action == ChangeAction.CREATE else definition,
        after=None if action == ChangeAction.DELETE else definition,
        actor=ADMIN,
    )


class TestModelVersionRecorder:
    """Tests for ModelVersionRecorder."""

    @pytest.fixture
    def repo(self):
        repo = AsyncMock()
        repo.add.return_value = MagicMock(version=1)
        return repo

    async def test_records_created_model(self, repo):
        await ModelVersionRecorder(repo)(_event(ChangeAction.CREATE))

        repo.add.assert_awaited_once_with(
            model_name="Product",
            definition={"name": "Product", "fields": []},
            change_description="Created model Product",
            created_by="a1",
        )

    async def test_records_updated_model(self, repo):
        await ModelVersionRecorder(repo)(_event(ChangeAction.UPDATE))

        assert repo.add.await_args.kwargs["change_description"] == "Updated model Product"

    async def test_ignores_deleted_model(self, repo):
        await ModelVersionRecorder(repo)(_event(ChangeAction.DELETE))

        repo.add.assert_not_awaited()

    async def test_ignores_record_events(self, repo):
        await ModelVersionRecorder(repo)(_event(ChangeAction.CREATE, EntityType.DATA_RECORD))

        repo.add.assert_not_awaited()


class TestModelVersionService:
    """Tests for ModelVersionService."""

    async def test_list_versions(self):
        repo = AsyncMock()
        repo.list_for_model.return_value = ["v2", "v1"]

        result = await ModelVersionService(repo).list_versions("Product")

        assert result == ["v2", "v1"]
        repo.list_for_model.assert_awaited_once_with("Product")

    async def test_get_missing_version(self):
        repo = AsyncMock()
        repo.get.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await ModelVersionService(repo).get_version("Product", 7)

        assert exc_info.value.details == {"resource": "model_version", "resource_id": "Product@7"}
