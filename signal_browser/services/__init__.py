"""
Service layer: record acquisition and per-session controllers
"""

from .record_source import FileRecordSource, MockRecordSource, RecordSource, build_record_source
from .session_service import ControllerSessions, generate_session_id

__all__ = [
    "RecordSource",
    "MockRecordSource",
    "FileRecordSource",
    "build_record_source",
    "ControllerSessions",
    "generate_session_id",
]
