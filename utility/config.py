"""
Runtime configuration

Settings are read from the environment (and a local .env file, if present).
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("OT_LOG_LEVEL", "INFO")
JSONLD_INDENT = int(os.getenv("OT_JSONLD_INDENT", "2"))
SCHEMA_DIR: Optional[Path] = Path(os.getenv("OT_SCHEMA_DIR")) if os.getenv("OT_SCHEMA_DIR") else None
SCHEMA_TIMEOUT = float(os.getenv("OT_SCHEMA_TIMEOUT", "10"))


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command-line entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
