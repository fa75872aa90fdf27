"""
Runtime configuration for the resume parsing service.

Values come from the environment (optionally a local .env file). Heuristic
tables used by the parsers are module constants in their own modules and are
not configurable here.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("APPLYLY_LOG_LEVEL", "INFO").upper()
MAX_UPLOAD_BYTES = int(os.getenv("APPLYLY_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
PDF_X_TOLERANCE = float(os.getenv("APPLYLY_PDF_X_TOLERANCE", "3"))

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once and quiet pdfminer's own chatter."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("pdfminer").setLevel(logging.ERROR)
    logging.getLogger("pdfplumber").setLevel(logging.ERROR)
