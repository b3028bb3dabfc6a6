import asyncio

import pytest

from app.layout_defaults import initial_layout
from app.services.gemini import TransformError
from app.services.session import ADVISORY_MESSAGE, EditInProgressError, EditorSession, SessionStore


class FakeTransformer:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def transform(self, layout, instruction):
        self.calls.append((layout, instruction))
        if self.error:
            raise self.error
        return self.result


def _shrunk_layout():
    layout = initial_layout()
    layout.land.width = 50
    return layout


def test_successful_edit_replaces_layout():
    new_layout = _shrunk_layout()
    session = EditorSession(FakeTransformer(result=new_layout), initial_layout)

    assert asyncio.run(session.submit("shrink the lot")) is True
    assert session.layout is new_layout
    assert session.error is None


def test_failed_edit_keeps_layout_and_sets_one_message():
    session = EditorSession(FakeTransformer(error=TransformError("boom")), initial_layout)
    before = session.layout

    assert asyncio.run(session.submit("do something")) is False
    assert session.layout is before
    assert session.layout == initial_layout()
    assert session.error == ADVISORY_MESSAGE
    assert not session.is_generating


def test_next_submission_clears_previous_error():
    transformer = FakeTransformer(error=TransformError("boom"))
    session = EditorSession(transformer, initial_layout)
    asyncio.run(session.submit("first"))

    transformer.error = None
    transformer.result = _shrunk_layout()
    asyncio.run(session.submit("second"))
    assert session.error is None


def test_blank_instruction_is_ignored():
    transformer = FakeTransformer(result=_shrunk_layout())
    session = EditorSession(transformer, initial_layout)
    assert asyncio.run(session.submit("   ")) is False
    assert transformer.calls == []


def test_transformer_receives_a_snapshot():
    transformer = FakeTransformer(result=_shrunk_layout())
    session = EditorSession(transformer, initial_layout)
    original = session.layout
    asyncio.run(session.submit("anything"))

    sent, _ = transformer.calls[0]
    assert sent == original
    assert sent is not original


def test_only_one_edit_in_flight():
    class SlowTransformer:
        def __init__(self):
            self.gate = None

        async def transform(self, layout, instruction):
            await self.gate.wait()
            return _shrunk_layout()

    async def scenario():
        transformer = SlowTransformer()
        transformer.gate = asyncio.Event()
        session = EditorSession(transformer, initial_layout)

        first = asyncio.ensure_future(session.submit("first"))
        await asyncio.sleep(0)
        assert session.is_generating
        with pytest.raises(EditInProgressError):
            await session.submit("second")

        transformer.gate.set()
        assert await first is True
        assert not session.is_generating

    asyncio.run(scenario())


def test_unexpected_errors_propagate():
    session = EditorSession(FakeTransformer(error=RuntimeError("bug")), initial_layout)
    with pytest.raises(RuntimeError):
        asyncio.run(session.submit("x"))
    assert not session.is_generating


def test_reset_and_replace():
    session = EditorSession(FakeTransformer(error=TransformError("x")), initial_layout)
    asyncio.run(session.submit("x"))

    replacement = _shrunk_layout()
    session.replace(replacement)
    assert session.layout == replacement
    assert session.layout is not replacement
    assert session.error is None

    session.reset()
    assert session.layout == initial_layout()


def test_store_creates_one_session_per_id():
    store = SessionStore(FakeTransformer(), initial_layout)
    assert store.get("a") is store.get("a")
    assert store.get("a") is not store.get("b")
    assert len(store) == 2


def test_store_evicts_least_recently_used_session():
    store = SessionStore(FakeTransformer(), initial_layout, max_sessions=3)
    kept = store.get("a")
    store.get("b")
    store.get("c")
    store.get("a")
    store.get("d")
    store.get("e")

    assert len(store) == 3
    assert "a" in store
    assert "b" not in store and "c" not in store
    assert store.get("a") is kept


def test_store_stays_bounded_under_many_ids():
    store = SessionStore(FakeTransformer(), initial_layout, max_sessions=16)
    for i in range(200):
        store.get(f"s{i}")
    assert len(store) == 16
    assert "s199" in store
    assert "s0" not in store


def test_store_needs_room_for_one_session():
    with pytest.raises(ValueError):
        SessionStore(FakeTransformer(), initial_layout, max_sessions=0)
