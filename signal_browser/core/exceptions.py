class SignalBrowserError(Exception):
    """Base exception for all signal_browser errors"""
    pass


class InvalidArgumentError(SignalBrowserError, ValueError):
    """
    Caller supplied an argument the engines cannot work with:
    non-positive page size, negative page index, unknown sort column, etc.
    """
    pass


class InvalidTimeFormatError(SignalBrowserError, ValueError):
    """Time-of-day string does not match H[H]:MM[:SS] (24-hour)"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid time of day {raw!r}; expected HH:MM or HH:MM:SS")


class ConfigError(SignalBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class RecordSourceError(SignalBrowserError):
    """
    A record source could not produce a complete snapshot
    (missing file, unreadable rows, bad types)
    """
    pass
