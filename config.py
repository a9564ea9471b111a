"""Runtime settings read from the environment (and ``.env`` if present)."""

import logging
import os

from dotenv import load_dotenv

# Load .env if present (optional)
load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/webhook")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
