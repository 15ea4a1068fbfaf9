from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from signal_browser.config.model import GlobalConfig
from signal_browser.core.view_controller import SignalBrowserController
from signal_browser.services.session_service import ControllerSessions


@dataclass
class AppConfig:
    """
    Shared context handed to layout builders and callback registration
    instead of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    sessions: Optional[ControllerSessions] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.sessions is None:
            raise RuntimeError("AppConfig.sessions must be initialized.")

    @contextmanager
    def locked_controller(self, session_id: Optional[str]) -> Iterator[SignalBrowserController]:
        """
        The session's controller, held under its session lock for the
        duration of the `with` block. Callbacks do all reads and writes inside it.
        """
        self.validate()
        with self.sessions.locked(session_id) as controller:
            yield controller
