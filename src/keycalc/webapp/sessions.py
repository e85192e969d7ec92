"""
In-memory session registry for calculator engines.

Each session owns one Calculator. All access goes through a single lock so
the threaded Flask server never mutates one token list from two requests.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple, TypedDict

from ..calc_types import DisplayState
from ..engine import Calculator

logger = logging.getLogger(__name__)


class SessionInfo(TypedDict):
    """Session metadata."""
    session_id: str
    created_at: str
    key_count: int


class _Session:
    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self.calculator = Calculator()
        self.created_at = datetime.now(timezone.utc).isoformat()
        self.key_count = 0


# In-memory session storage, oldest first
_sessions: "OrderedDict[str, _Session]" = OrderedDict()
_sessions_lock = threading.Lock()


def create_session(max_sessions: int = 1000) -> Tuple[str, DisplayState]:
    """
    Create a new calculator session.

    Args:
        max_sessions: Registry size; the oldest session is evicted beyond it

    Returns:
        Session ID string and the new session's initial display state
    """
    session_id = str(uuid.uuid4())

    with _sessions_lock:
        session = _Session(session_id)
        _sessions[session_id] = session
        # The new session is last, so eviction never removes it
        while len(_sessions) > max(1, max_sessions):
            evicted, _ = _sessions.popitem(last=False)
            logger.info("Evicted session %s", evicted)
        state = session.calculator.state

    logger.info("Created session %s", session_id)
    return session_id, state


def get_state(session_id: str) -> Optional[DisplayState]:
    with _sessions_lock:
        session = _sessions.get(session_id)
        return session.calculator.state if session else None


def press_keys(session_id: str, keys: Sequence[str]) -> Optional[DisplayState]:
    """
    Apply keys to a session's calculator in order.

    Keys must already be validated; see ``services.validate_keys``.

    Returns:
        Display state after the last key, or None if the session is unknown
    """
    with _sessions_lock:
        session = _sessions.get(session_id)
        if session is None:
            return None
        state = session.calculator.press_many(keys)
        session.key_count += len(keys)
        return state


def clear_session(session_id: str) -> Optional[DisplayState]:
    with _sessions_lock:
        session = _sessions.get(session_id)
        if session is None:
            return None
        return session.calculator.clear()


def delete_session(session_id: str) -> bool:
    with _sessions_lock:
        removed = _sessions.pop(session_id, None) is not None
    if removed:
        logger.info("Deleted session %s", session_id)
    return removed


def list_sessions() -> List[SessionInfo]:
    """
    List all sessions.

    Returns:
        Session metadata, oldest first
    """
    with _sessions_lock:
        return [
            SessionInfo(
                session_id=s.session_id,
                created_at=s.created_at,
                key_count=s.key_count,
            )
            for s in _sessions.values()
        ]


def reset_sessions() -> None:
    """Drop every session."""
    with _sessions_lock:
        _sessions.clear()


__all__: List[str] = [
    "SessionInfo",
    "create_session",
    "get_state",
    "press_keys",
    "clear_session",
    "delete_session",
    "list_sessions",
    "reset_sessions",
]
