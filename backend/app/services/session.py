# app/services/session.py
"""
In-memory editing sessions.

A session owns exactly one layout. An edit sends a snapshot of it to the
transformer and, on success, replaces it wholesale; on any failure the layout
is untouched and a single advisory message is recorded. Only one edit may be
in flight per session. Nothing is persisted.
"""
import logging
from collections import OrderedDict
from typing import Callable, Optional

from blueprint.layout import HouseLayout
from app.services.gemini import TransformError

logger = logging.getLogger(__name__)

ADVISORY_MESSAGE = "Failed to update layout. Please try a different instruction."


class EditInProgressError(Exception):
    """A second edit was submitted while the first was still running."""


class EditorSession:
    def __init__(self, transformer, initial_layout: Callable[[], HouseLayout]):
        self.transformer = transformer
        self._initial_layout = initial_layout
        self.layout: HouseLayout = initial_layout()
        self.error: Optional[str] = None
        self._in_flight = False

    @property
    def is_generating(self) -> bool:
        return self._in_flight

    async def submit(self, instruction: str) -> bool:
        """Apply one instruction. Returns True when the layout was replaced."""
        if not instruction or not instruction.strip():
            return False
        if self._in_flight:
            raise EditInProgressError("A layout update is already in progress")

        self._in_flight = True
        self.error = None
        try:
            new_layout = await self.transformer.transform(self.layout.snapshot(), instruction)
        except TransformError as e:
            logger.warning("Layout edit failed for %r: %s", instruction, e)
            self.error = ADVISORY_MESSAGE
            return False
        finally:
            self._in_flight = False

        self.layout = new_layout
        logger.info("Layout updated: %d floor(s)", len(new_layout.floors))
        return True

    def replace(self, layout: HouseLayout) -> None:
        self.layout = layout.snapshot()
        self.error = None

    def reset(self) -> None:
        self.layout = self._initial_layout()
        self.error = None


class SessionStore:
    """Sessions keyed by id, least recently used evicted past `max_sessions`."""

    def __init__(self, transformer, initial_layout: Callable[[], HouseLayout], max_sessions: int = 256):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.transformer = transformer
        self.initial_layout = initial_layout
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, EditorSession]" = OrderedDict()

    def get(self, session_id: str) -> EditorSession:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session

        session = EditorSession(self.transformer, self.initial_layout)
        self._sessions[session_id] = session
        logger.debug("Created editing session %s", session_id)
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug("Evicted editing session %s", evicted)
        return session

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
