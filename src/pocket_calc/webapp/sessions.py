"""
In-memory calculator sessions for the HTTP adapter.

Each session owns one BufferEditor. The registry is shared by the Flask
worker threads, so every access goes through `_sessions_lock`; the editors
guard their own buffers.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import List, Optional, TypedDict

from ..config import CalculatorConfig
from ..editor import BufferEditor

logger = logging.getLogger(__name__)


class SessionInfo(TypedDict):
    """Snapshot of a session for JSON responses."""
    session_id: str
    display: str
    error: Optional[str]
    created_at: str


class _Session:
    def __init__(self, session_id: str, editor: BufferEditor):
        self.session_id = session_id
        self.editor = editor
        self.created_at = datetime.now(timezone.utc).isoformat()


_sessions: "OrderedDict[str, _Session]" = OrderedDict()
_sessions_lock = threading.Lock()
_MAX_SESSIONS = 1000


def create_session(config: Optional[CalculatorConfig] = None) -> str:
    """
    Create a calculator session with a fresh "0" buffer.

    Args:
        config: Calculator settings for the session's editor

    Returns:
        Session ID string
    """
    session_id = str(uuid.uuid4())
    session = _Session(session_id, BufferEditor(config))

    with _sessions_lock:
        _sessions[session_id] = session
        # Drop the oldest sessions once the registry is full
        while len(_sessions) > _MAX_SESSIONS:
            evicted, _ = _sessions.popitem(last=False)
            logger.info("Evicted calculator session %s", evicted)

    logger.info("Created calculator session %s", session_id)
    return session_id


def get_editor(session_id: str) -> Optional[BufferEditor]:
    with _sessions_lock:
        session = _sessions.get(session_id)
    return session.editor if session else None


def get_session(session_id: str) -> Optional[SessionInfo]:
    """
    Get the current display and last failure of a session.

    Returns:
        Session snapshot or None if not found
    """
    with _sessions_lock:
        session = _sessions.get(session_id)
    if session is None:
        return None
    return _snapshot(session)


def list_sessions() -> List[SessionInfo]:
    with _sessions_lock:
        sessions = list(_sessions.values())
    return [_snapshot(s) for s in sessions]


def delete_session(session_id: str) -> bool:
    with _sessions_lock:
        removed = _sessions.pop(session_id, None)
    if removed is not None:
        logger.info("Deleted calculator session %s", session_id)
    return removed is not None


def press_keys(session_id: str, symbols: List[str]) -> Optional[SessionInfo]:
    """Feed symbols into a session's editor; None if the session is unknown."""
    with _sessions_lock:
        session = _sessions.get(session_id)
    if session is None:
        return None
    session.editor.submit_many(symbols)
    return _snapshot(session)


def _snapshot(session: _Session) -> SessionInfo:
    err = session.editor.last_error
    return SessionInfo(
        session_id=session.session_id,
        display=session.editor.buffer,
        error=err.kind if err is not None else None,
        created_at=session.created_at,
    )
