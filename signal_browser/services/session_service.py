from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence, Tuple

from signal_browser.core.record import SignalRecord
from signal_browser.core.view_controller import SignalBrowserController

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    return f"session-{uuid.uuid4().hex[:8]}"


@dataclass
class _Session:
    controller: SignalBrowserController
    # Serialises every read and write of this session's controller
    lock: threading.Lock = field(default_factory=threading.Lock)


class ControllerSessions:
    """
    One SignalBrowserController per browser session.

    Controllers are never shared between sessions; each one owns its own
    filter / sort / page state. The record snapshot itself is immutable and
    is handed to every new controller as-is.

    The Dash server is threaded, so overlapping requests from one browser can
    reach the same controller. Callers go through `locked()`, which holds the
    session's own lock for the whole operation; other sessions are not blocked.

    The least recently used session is evicted once `max_sessions` is exceeded.
    """

    def __init__(
        self,
        records_provider: Callable[[], Sequence[SignalRecord]],
        *,
        page_size: int,
        max_sessions: int = 64,
    ):
        self._records_provider = records_provider
        self._page_size = page_size
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, _Session]" = OrderedDict()
        # Guards the session map only
        self._lock = threading.Lock()

    def _entry(self, session_id: Optional[str]) -> Tuple[str, _Session]:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return session_id, self._sessions[session_id]

            session_id = session_id or generate_session_id()
            entry = _Session(
                SignalBrowserController(
                    self._records_provider(),
                    page_size=self._page_size,
                )
            )
            self._sessions[session_id] = entry

            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Session evicted", extra={"session_id": evicted})

            logger.info(
                "Session created",
                extra={"session_id": session_id, "n_sessions": len(self._sessions)},
            )
            return session_id, entry

    def get(self, session_id: Optional[str]) -> Tuple[str, SignalBrowserController]:
        """
        Return (session_id, controller), creating a fresh session when the id
        is missing or has been evicted.

        The controller is returned unlocked; use `locked()` from request handlers.
        """
        session_id, entry = self._entry(session_id)
        return session_id, entry.controller

    def lock_for(self, session_id: Optional[str]) -> threading.Lock:
        _, entry = self._entry(session_id)
        return entry.lock

    @contextmanager
    def locked(self, session_id: Optional[str]) -> Iterator[SignalBrowserController]:
        """Yield the session's controller while holding that session's lock."""
        _, entry = self._entry(session_id)
        with entry.lock:
            yield entry.controller

    def drop(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
