"""Record business logic.

Every data action follows the same gates, in order: the model must
exist, the principal's role must be allowed the action, a targeted
record must exist and pass the ownership check, and a write payload
must validate. Only then is the store called and the change announced
to the hooks.
"""

from collections.abc import Mapping
from typing import Annotated, Any

import structlog
from fastapi import Depends

from lowcode.api.hooks import Hooks
from lowcode.core.auth.schemas import Principal
from lowcode.core.errors import ForbiddenError, NotFoundError, ValidationError
from lowcode.core.events import ChangeAction, ChangeEvent, ChangeHooks, EntityType
from lowcode.core.permissions import (
    Action,
    can_perform,
    check_ownership,
    filter_visible_records,
    get_owner_id,
)
from lowcode.core.stores import ModelDefinitionStore, Record, RecordStore
from lowcode.core.validation import ModelDefinition, validate_model_data
from lowcode.modules.data.repos import RecordRepo
from lowcode.modules.models.repos import ModelDefinitionRepo


log = structlog.get_logger()


class RecordService:
    """Service for CRUD on the records of runtime-defined models."""

    def __init__(
        self,
        models: ModelDefinitionRepo,
        records: RecordRepo,
        hooks: Hooks,
    ) -> None:
        self.models: ModelDefinitionStore = models
        self.records: RecordStore = records
        self.hooks: ChangeHooks = hooks

    async def _get_model(self, model_name: str) -> ModelDefinition:
        model = await self.models.get(model_name)
        if not model:
            raise NotFoundError("Model not found", resource="model", resource_id=model_name)
        return model

    def _authorize(self, principal: Principal, action: Action, model: ModelDefinition) -> None:
        if not can_perform(principal.role, action, model.permissions):
            log.warning(
                "permission_denied",
                user_id=principal.id,
                role=principal.role.value,
                model_name=model.name,
                action=action.value,
            )
            raise ForbiddenError(
                "Permission denied",
                details={"model": model.name, "action": action.value},
            )

    async def _get_accessible_record(
        self,
        principal: Principal,
        model: ModelDefinition,
        record_id: str,
    ) -> Record:
        record = await self.records.get_by_id(model.name, record_id)
        if not record:
            raise NotFoundError("Record not found", resource="record", resource_id=record_id)

        owner_id = get_owner_id(record, model.owner_field)
        if not check_ownership(principal.id, owner_id, principal.role):
            log.warning(
                "ownership_denied",
                user_id=principal.id,
                role=principal.role.value,
                model_name=model.name,
                record_id=record_id,
            )
            raise ForbiddenError(
                "You do not have access to this record",
                error_code="ownership_denied",
                details={"model": model.name, "record_id": record_id},
            )
        return record

    def _validate(
        self,
        principal: Principal,
        model: ModelDefinition,
        data: Mapping[str, Any],
    ) -> None:
        errors = validate_model_data(data, model)
        # The owner value is system-assigned, never a client error
        if model.owner_field:
            errors.pop(model.owner_field, None)

        if errors:
            log.info(
                "record_validation_failed",
                user_id=principal.id,
                model_name=model.name,
                fields=sorted(errors),
            )
            raise ValidationError("Validation failed", field_errors=errors)

    async def list_records(self, principal: Principal, model_name: str) -> list[Record]:
        """List the records of a model visible to the principal."""
        model = await self._get_model(model_name)
        self._authorize(principal, Action.READ, model)

        records = await self.records.list(model.name)
        return [
            dict(record)
            for record in filter_visible_records(records, principal, model.owner_field)
        ]

    async def get_record(
        self,
        principal: Principal,
        model_name: str,
        record_id: str,
    ) -> Record:
        """Get a single record.

        Raises:
            NotFoundError: If the model or record does not exist
            ForbiddenError: If the role or ownership check fails
        """
        model = await self._get_model(model_name)
        self._authorize(principal, Action.READ, model)
        return await self._get_accessible_record(principal, model, record_id)

    async def create_record(
        self,
        principal: Principal,
        model_name: str,
        payload: Mapping[str, Any],
    ) -> Record:
        """Validate and store a new record.

        A client-supplied ``id`` is discarded. When the model has an
        owner field it is set to the principal's id.

        Raises:
            NotFoundError: If the model does not exist
            ForbiddenError: If the role may not create
            ValidationError: If the payload fails validation
        """
        model = await self._get_model(model_name)
        self._authorize(principal, Action.CREATE, model)

        data = {k: v for k, v in payload.items() if k != "id"}
        if model.owner_field:
            data[model.owner_field] = principal.id

        self._validate(principal, model, data)

        record = await self.records.create(model.name, data)
        log.info(
            "record_created",
            model_name=model.name,
            record_id=record["id"],
            user_id=principal.id,
        )

        await self.hooks.emit(
            ChangeEvent(
                action=ChangeAction.CREATE,
                entity_type=EntityType.DATA_RECORD,
                entity_id=record["id"],
                entity_name=model.name,
                before=None,
                after=record,
                actor=principal,
            )
        )
        return record

    async def update_record(
        self,
        principal: Principal,
        model_name: str,
        record_id: str,
        payload: Mapping[str, Any],
    ) -> Record:
        """Merge a partial payload into an existing record.

        The ``id`` and the owner field are stripped from the payload, so
        neither can be changed, whatever the role. The merged record is
        validated as a whole.

        Raises:
            NotFoundError: If the model or record does not exist
            ForbiddenError: If the role or ownership check fails
            ValidationError: If the merged record fails validation
        """
        model = await self._get_model(model_name)
        self._authorize(principal, Action.UPDATE, model)
        existing = await self._get_accessible_record(principal, model, record_id)

        changes = {
            k: v
            for k, v in payload.items()
            if k != "id" and k != model.owner_field
        }
        self._validate(principal, model, {**existing, **changes})

        updated = await self.records.update(model.name, record_id, changes)
        if updated is None:
            raise NotFoundError("Record not found", resource="record", resource_id=record_id)

        log.info(
            "record_updated",
            model_name=model.name,
            record_id=record_id,
            user_id=principal.id,
            fields=sorted(changes),
        )

        await self.hooks.emit(
            ChangeEvent(
                action=ChangeAction.UPDATE,
                entity_type=EntityType.DATA_RECORD,
                entity_id=record_id,
                entity_name=model.name,
                before=existing,
                after=updated,
                actor=principal,
            )
        )
        return updated

    async def delete_record(
        self,
        principal: Principal,
        model_name: str,
        record_id: str,
    ) -> None:
        """Delete a record.

        Raises:
            NotFoundError: If the model or record does not exist
            ForbiddenError: If the role or ownership check fails
        """
        model = await self._get_model(model_name)
        self._authorize(principal, Action.DELETE, model)
        existing = await self._get_accessible_record(principal, model, record_id)

        if not await self.records.delete(model.name, record_id):
            raise NotFoundError("Record not found", resource="record", resource_id=record_id)

        log.info(
            "record_deleted",
            model_name=model.name,
            record_id=record_id,
            user_id=principal.id,
        )

        await self.hooks.emit(
            ChangeEvent(
                action=ChangeAction.DELETE,
                entity_type=EntityType.DATA_RECORD,
                entity_id=record_id,
                entity_name=model.name,
                before=existing,
                after=None,
                actor=principal,
            )
        )


# Type alias for dependency injection
RecordSvc = Annotated[RecordService, Depends(RecordService)]
