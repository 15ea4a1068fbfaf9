import logging
import os
import socket

from signal_browser.logging_config import configure_logging
from signal_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("signal_browser.app")

app = create_dash_app(os.getenv("SIGNAL_BROWSER_CONFIG", "config"))
server = app.server


def port_is_free(port: int, host: str = "localhost") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex((host, port)) != 0


def pick_port(preferred: int, attempts: int = 100) -> int:
    """First free port in [preferred, preferred + attempts); `preferred` if none is."""
    for port in range(preferred, preferred + attempts):
        if port_is_free(port):
            return port
    return preferred


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8051"))
    port = pick_port(preferred_port)
    if port != preferred_port:
        logger.warning(
            "Preferred port taken",
            extra={"preferred_port": preferred_port, "port": port},
        )

    debug = os.getenv("DEBUG", "0") == "1"
    logger.info("Starting signal browser", extra={"port": port, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)
