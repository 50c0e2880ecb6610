"""Post-change hooks.

Services emit a ChangeEvent after every successful mutation of a model
definition or record. Audit logging and model versioning subscribe to
these events, so the decision logic never deals with bookkeeping.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import structlog

from lowcode.core.auth.schemas import Principal


logger = structlog.get_logger()


class ChangeAction(StrEnum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class EntityType(StrEnum):
    MODEL_DEFINITION = "model_definition"
    DATA_RECORD = "data_record"


@dataclass(frozen=True)
class ChangeEvent:
    """A committed change to a model definition or record.

    Attributes:
        action: What happened
        entity_type: Kind of entity that changed
        entity_id: Record id, or model name for definitions
        entity_name: Model name the entity belongs to
        before: State before the change (None on create)
        after: State after the change (None on delete)
        actor: The principal who made the change
    """

    action: ChangeAction
    entity_type: EntityType
    entity_id: str
    entity_name: str
    before: dict[str, Any] | None
    after: dict[str, Any] | None
    actor: Principal


ChangeHandler = Callable[[ChangeEvent], Awaitable[None]]


class ChangeHooks:
    """Registry of async subscribers to change events.

    Handlers run in subscription order. A failing handler propagates its
    exception so the surrounding transaction is rolled back.
    """

    def __init__(self, handlers: list[ChangeHandler] | None = None) -> None:
        self._handlers: list[ChangeHandler] = list(handlers or [])

    def subscribe(self, handler: ChangeHandler) -> None:
        self._handlers.append(handler)

    async def emit(self, event: ChangeEvent) -> None:
        logger.debug(
            "change_event_emitted",
            action=event.action.value,
            entity_type=event.entity_type.value,
            entity_id=event.entity_id,
            handlers=len(self._handlers),
        )
        for handler in self._handlers:
            await handler(event)
