"""Unit tests for change hooks."""

import pytest

from lowcode.core.events import ChangeAction, ChangeEvent, ChangeHooks, EntityType
from tests.factories import PrincipalFactory


pytestmark = pytest.mark.unit


@pytest.fixture
def event() -> ChangeEvent:
    return ChangeEvent(
        action=ChangeAction.CREATE,
        entity_type=EntityType.DATA_RECORD,
        entity_id="r1",
        entity_name="Product",
        before=None,
        after={"id": "r1"},
        actor=PrincipalFactory.build(),
    )


class TestChangeHooks:
    """Tests for ChangeHooks."""

    async def test_handlers_run_in_subscription_order(self, event):
        calls: list[str] = []

        async def first(e: ChangeEvent) -> None:
            calls.append("first")

        async def second(e: ChangeEvent) -> None:
            calls.append("second")

        hooks = ChangeHooks([first])
        hooks.subscribe(second)
        await hooks.emit(event)

        assert calls == ["first", "second"]

    async def test_handler_receives_event(self, event):
        received: list[ChangeEvent] = []

        async def handler(e: ChangeEvent) -> None:
            received.append(e)

        await ChangeHooks([handler]).emit(event)

        assert received == [event]

    async def test_failure_propagates_and_stops_later_handlers(self, event):
        calls: list[str] = []

        async def failing(e: ChangeEvent) -> None:
            raise RuntimeError("storage down")

        async def later(e: ChangeEvent) -> None:
            calls.append("later")

        with pytest.raises(RuntimeError, match="storage down"):
            await ChangeHooks([failing, later]).emit(event)

        assert calls == []

    async def test_no_handlers(self, event):
        await ChangeHooks().emit(event)

    def test_event_is_immutable(self, event):
        with pytest.raises(AttributeError):
            event.entity_id = "other"  # type: ignore[misc]
