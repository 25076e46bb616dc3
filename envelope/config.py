import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("ENVELOPE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("ENVELOPE_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configura el logger `envelope` con un único handler de consola."""

    root = logging.getLogger("envelope")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
